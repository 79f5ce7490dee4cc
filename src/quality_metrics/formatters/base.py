"""Base formatter interface for metrics report rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..models import MetricsRecord, RunContext


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, records: List[MetricsRecord], context: RunContext) -> None:
        """Render the report to stderr/stdout as appropriate."""

    @abstractmethod
    def format(self, records: List[MetricsRecord], context: RunContext) -> str:
        """Return formatted string representation of the report."""
