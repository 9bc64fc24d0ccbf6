"""Base formatter interface for Stitch."""

from abc import ABC, abstractmethod

from stitch.core.types import AnalysisResult, ColorSettings


class Formatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, color_settings: ColorSettings = ColorSettings()) -> None:
        self.color_settings = color_settings

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this formatter."""
        pass

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Format analysis results.

        Args:
            result: The analysis result to format.

        Returns:
            Formatted output as a string.
        """
        pass
