"""Root exception for quality_metrics."""

from typing import Dict, Optional


class QualityMetricsError(Exception):
    """Root of every error raised by quality_metrics.

    ``details`` holds key/value context appended to the message when printed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
