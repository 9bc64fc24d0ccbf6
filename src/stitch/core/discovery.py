"""Discovery of the Swift source files to analyze.

Files come from exactly one of these places, tried in order:

1. paths given on the command line,
2. an include/exclude search described by the config file,
3. the ``SRCROOT`` directory exported by Xcode build phases.

Whatever the source, the result is sorted and free of duplicates.
"""

import fnmatch
import os
from typing import Callable, Iterable, Iterator, Mapping, Optional

from stitch.core.config import ConfigError, FileConfiguration
from stitch.core.formats import Format

SOURCE_EXTENSION = ".swift"
SRCROOT_VARIABLE = "SRCROOT"
CONFIG_LOCATION_MESSAGE = "Configuration file location: "


class IOUnavailableError(ConfigError):
    """A path does not exist, is unreadable, or cannot be traversed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def get_src_root(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Read the source root exported by Xcode.

    Args:
        environ: Environment mapping (defaults to os.environ).

    Returns:
        The SRCROOT value, or None if unset or empty.
    """
    if environ is None:
        environ = os.environ
    src_root = environ.get(SRCROOT_VARIABLE)
    if not src_root:
        return None
    return src_root


def is_source_file(path: str) -> bool:
    """Check that ``path`` is a readable regular file with a .swift name."""
    return (
        path.endswith(SOURCE_EXTENSION)
        and os.path.isfile(path)
        and os.access(path, os.R_OK)
    )


def discover_files(
    cli_paths: Iterable[str],
    file_config: Optional[FileConfiguration],
    src_root: Optional[str],
    notify: Optional[Callable[[str], None]] = None,
    active_format: Optional[Format] = None,
) -> list[str]:
    """Collect the files to analyze.

    Args:
        cli_paths: Positional paths from the command line.
        file_config: Parsed config file, or None.
        src_root: Source root from the environment, or None.
        notify: Receives the config file location message.
        active_format: Resolved output format; the location message is only
            emitted for the Xcode format.

    Returns:
        Sorted list of file paths.

    Raises:
        IOUnavailableError: If a path is missing or cannot be traversed.
    """
    paths = list(cli_paths)

    if paths:
        return find_files_in_paths(paths)

    if file_config is not None:
        if file_config.file_location and active_format == Format.XCODE:
            (notify or print)(CONFIG_LOCATION_MESSAGE + file_config.file_location)
        root = src_root or "."
        return find_configured_files(root, file_config.include, file_config.exclude)

    if src_root:
        return find_files_in_paths([src_root])

    return []


def find_files_in_paths(paths: Iterable[str]) -> list[str]:
    """Expand files and directories into the Swift files they name.

    A file is kept only if it is itself a readable Swift file; a directory
    is searched recursively.
    """
    found: set[str] = set()
    for path in paths:
        if os.path.isdir(path):
            found.update(p for p in _walk(path) if is_source_file(p))
        elif os.path.exists(path):
            if is_source_file(path):
                found.add(path)
        else:
            raise IOUnavailableError(path, "No such file or directory")
    return sorted(found)


def find_configured_files(
    root: str,
    include: Iterable[str],
    exclude: Iterable[str],
) -> list[str]:
    """Search ``root`` with include and exclude glob patterns.

    Patterns are matched against paths relative to ``root``, using ``/`` as
    separator. A directory matching an exclude pattern is not entered. A file
    is kept if it, or one of the directories it sits in, matches some include
    pattern (any file when there are none), and it matches no exclude
    pattern. So ``include: [Sources]`` takes the whole ``Sources`` tree.
    Returned paths are absolute.
    """
    if not os.path.isdir(root):
        raise IOUnavailableError(root, "Not a directory")

    include = list(include)
    exclude = list(exclude)
    base = os.path.abspath(root)

    def excluded(relative: str) -> bool:
        return any(fnmatch.fnmatch(relative, pattern) for pattern in exclude)

    def included(relative: str) -> bool:
        if not include:
            return True
        # A matching directory brings in everything below it
        parts = relative.split("/")
        return any(
            fnmatch.fnmatch("/".join(parts[:depth]), pattern)
            for depth in range(1, len(parts) + 1)
            for pattern in include
        )

    found: set[str] = set()
    for path in _walk(base, prune=lambda d: excluded(_relative(d, base))):
        relative = _relative(path, base)
        if excluded(relative) or not included(relative):
            continue
        if is_source_file(path):
            found.add(path)
    return sorted(found)


def _relative(path: str, base: str) -> str:
    return os.path.relpath(path, base).replace(os.sep, "/")


def _walk(
    top: str,
    prune: Optional[Callable[[str], bool]] = None,
) -> Iterator[str]:
    """Yield every non-directory entry below ``top``, depth first.

    Symlinked directories are not entered.
    """
    try:
        with os.scandir(top) as entries:
            children = sorted(entries, key=lambda e: e.name)
    except OSError as e:
        raise IOUnavailableError(top, e.strerror or str(e)) from e

    for entry in children:
        path = os.path.join(top, entry.name)
        if entry.is_dir(follow_symlinks=False):
            if prune is not None and prune(path):
                continue
            yield from _walk(path, prune)
        else:
            yield path
