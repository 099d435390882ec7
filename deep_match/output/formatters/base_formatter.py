# Path: deep_match/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for summary formatters and a registry to look
them up by format name.

To add a new format:
1. Subclass BaseFormatter
2. Implement format_summary()
3. Register via FormatterRegistry.register()
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from ..report_models import ReportSummary


class BaseFormatter(ABC):
    """Abstract base for comparison summary formatters."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.json', '.txt')."""

    @abstractmethod
    def format_summary(self, summary: ReportSummary) -> str:
        """
        Render a summary to string.

        Args:
            summary: ReportSummary to render

        Returns:
            Formatted string representation
        """

    def write_summary(self, summary: ReportSummary, output_path: Path) -> Path:
        """
        Write a rendered summary into a directory.

        Args:
            summary: ReportSummary to render
            output_path: Directory to write into

        Returns:
            Path to the written file
        """
        output_path.mkdir(parents=True, exist_ok=True)
        label_a = Path(summary.label_a).stem
        label_b = Path(summary.label_b).stem
        filepath = output_path / f"match_{label_a}_vs_{label_b}{self.file_extension}"
        filepath.write_text(self.format_summary(summary), encoding='utf-8')
        return filepath


class FormatterRegistry:
    """Registry of available formatters, looked up by format name."""

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        instance = formatter_class()
        cls._formatters[instance.format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str) -> Optional[BaseFormatter]:
        """Get a formatter instance by name."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class()
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._formatters.keys())


__all__ = ['BaseFormatter', 'FormatterRegistry']
