"""Rule catalogue and enabled-rule resolution."""

from enum import Enum
from typing import Collection, Iterable, Optional

from stitch.core.config import ConfigError


class RuleValidationError(ConfigError):
    """One or more requested rule names are not recognized."""

    def __init__(self, unknown: Iterable[str]) -> None:
        self.unknown = tuple(sorted(set(unknown)))
        super().__init__(
            f"The following rules were not recognized: {', '.join(self.unknown)}"
        )


class Rule(Enum):
    """Every rule Stitch knows about, keyed by its stable name."""

    ANGLE_BRACKET_WHITESPACE = "angle-bracket-whitespace"
    ARROW_WHITESPACE = "arrow-whitespace"
    BRACE_STYLE = "brace-style"
    COLON_WHITESPACE = "colon-whitespace"
    COMMA_WHITESPACE = "comma-whitespace"
    COMMENTS_CAPITAL_LETTER = "comments-capital-letter"
    COMMENTS_SPACE = "comments-space"
    CONSTANT_K_PREFIX = "constant-k-prefix"
    CONSTANT_NAMING = "constant-naming"
    FORCED_TYPE_CAST = "forced-type-cast"
    FUNCTION_WHITESPACE = "function-whitespace"
    LEADING_WHITESPACE = "leading-whitespace"
    LOWER_CAMEL_CASE = "lower-camel-case"
    MAX_CLASS_LENGTH = "max-class-length"
    MAX_CLOSURE_LENGTH = "max-closure-length"
    MAX_FILE_LENGTH = "max-file-length"
    MAX_FUNCTION_LENGTH = "max-function-length"
    MAX_LINE_LENGTH = "max-line-length"
    MAX_NAME_LENGTH = "max-name-length"
    MAX_STRUCT_LENGTH = "max-struct-length"
    MIN_NAME_LENGTH = "min-name-length"
    MULTIPLE_IMPORTS = "multiple-imports"
    OPERATOR_WHITESPACE = "operator-whitespace"
    PARENTHESIS_WHITESPACE = "parenthesis-whitespace"
    REDUNDANT_OPTIONAL_BINDING = "redundant-optional-binding"
    REMOVE_GET = "remove-get-for-readonly-computed-property"
    TERMINATING_NEWLINE = "terminating-newline"
    TERMINATING_SEMICOLON = "terminating-semicolon"
    TODO_SYNTAX = "todo-syntax"
    TRAILING_CLOSURE = "trailing-closure"
    TRAILING_WHITESPACE = "trailing-whitespace"
    UPPER_CAMEL_CASE = "upper-camel-case"

    @property
    def description(self) -> str:
        return RULE_DESCRIPTIONS[self]

    @classmethod
    def names(cls) -> list[str]:
        """Get all rule names."""
        return [rule.value for rule in cls]


RULE_DESCRIPTIONS: dict[Rule, str] = {
    Rule.ANGLE_BRACKET_WHITESPACE: "Flags whitespace inside generic angle brackets.",
    Rule.ARROW_WHITESPACE: "Requires single spaces around return arrows.",
    Rule.BRACE_STYLE: "Enforces one true brace style for declarations and blocks.",
    Rule.COLON_WHITESPACE: "Requires no space before and one space after a colon.",
    Rule.COMMA_WHITESPACE: "Requires no space before and one space after a comma.",
    Rule.COMMENTS_CAPITAL_LETTER: "Comments should start with a capital letter.",
    Rule.COMMENTS_SPACE: "Comments should start with a single space.",
    Rule.CONSTANT_K_PREFIX: "Flags constants prefixed with k.",
    Rule.CONSTANT_NAMING: "Global constants should be lowerCamelCase or UpperCamelCase.",
    Rule.FORCED_TYPE_CAST: "Flags forced type casts (as!).",
    Rule.FUNCTION_WHITESPACE: "Requires blank lines around function declarations.",
    Rule.LEADING_WHITESPACE: "Files must not start with whitespace.",
    Rule.LOWER_CAMEL_CASE: "Variables, functions and enum cases must be lowerCamelCase.",
    Rule.MAX_CLASS_LENGTH: "Class bodies must not exceed the configured number of lines.",
    Rule.MAX_CLOSURE_LENGTH: "Closure bodies must not exceed the configured number of lines.",
    Rule.MAX_FILE_LENGTH: "Files must not exceed the configured number of lines.",
    Rule.MAX_FUNCTION_LENGTH: "Function bodies must not exceed the configured number of lines.",
    Rule.MAX_LINE_LENGTH: "Lines must not exceed the configured number of characters.",
    Rule.MAX_NAME_LENGTH: "Identifiers must not exceed the configured length.",
    Rule.MAX_STRUCT_LENGTH: "Struct bodies must not exceed the configured number of lines.",
    Rule.MIN_NAME_LENGTH: "Identifiers must be at least the configured length.",
    Rule.MULTIPLE_IMPORTS: "Only one module may be imported per line.",
    Rule.OPERATOR_WHITESPACE: "Operator declarations need a space around the operator name.",
    Rule.PARENTHESIS_WHITESPACE: "Flags whitespace just inside parentheses.",
    Rule.REDUNDANT_OPTIONAL_BINDING: "Flags redundant optional binding syntax.",
    Rule.REMOVE_GET: "Read-only computed properties should omit the get keyword.",
    Rule.TERMINATING_NEWLINE: "Files must end with exactly one newline.",
    Rule.TERMINATING_SEMICOLON: "Statements must not end with a semicolon.",
    Rule.TODO_SYNTAX: "TODO comments must follow the TODO: or TODO(dev): format.",
    Rule.TRAILING_CLOSURE: "Single closure arguments should use trailing closure syntax.",
    Rule.TRAILING_WHITESPACE: "Lines must not end with whitespace.",
    Rule.UPPER_CAMEL_CASE: "Types and protocols must be UpperCamelCase.",
}


def check_valid_rules(known_rules: Iterable[str], requested: Iterable[str]) -> None:
    """Check that every requested rule name is known.

    Raises:
        RuleValidationError: Naming every unrecognized rule.
    """
    unknown = set(requested) - set(known_rules)
    if unknown:
        raise RuleValidationError(unknown)


def filter_by_only(known_rules: Iterable[str], requested: Iterable[str]) -> frozenset[str]:
    """Keep only the known rules named in ``requested``."""
    known = frozenset(known_rules)
    requested = frozenset(requested)
    check_valid_rules(known, requested)
    return known & requested


def filter_by_except(known_rules: Iterable[str], requested: Iterable[str]) -> frozenset[str]:
    """Drop the rules named in ``requested`` from the known rules."""
    known = frozenset(known_rules)
    requested = frozenset(requested)
    check_valid_rules(known, requested)
    return known - requested


def resolve_rules(
    cli_only: Optional[Collection[str]],
    cli_except: Optional[Collection[str]],
    file_only: Optional[Collection[str]],
    file_except: Optional[Collection[str]],
    known_rules: Iterable[str],
) -> frozenset[str]:
    """Compute the set of enabled rule names.

    ``only`` takes precedence over ``except``, and command-line lists take
    precedence over configuration-file lists. The first non-empty list in
    the order CLI only, CLI except, file only, file except decides the
    result; the remaining lists are neither applied nor validated.

    Args:
        cli_only: Rules requested with --only, or None.
        cli_except: Rules excluded with --except, or None.
        file_only: ``only`` list from the config file, or None.
        file_except: ``except`` list from the config file, or None.
        known_rules: The full universe of rule names.

    Returns:
        Frozen set of enabled rule names.

    Raises:
        RuleValidationError: If the selected list names unknown rules.
    """
    known = frozenset(known_rules)

    if cli_only:
        return filter_by_only(known, cli_only)
    if cli_except:
        return filter_by_except(known, cli_except)
    if file_only:
        return filter_by_only(known, file_only)
    if file_except:
        return filter_by_except(known, file_except)

    return known
