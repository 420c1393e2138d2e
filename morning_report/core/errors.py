"""Exception hierarchy for the morning report pipeline."""

from typing import Any, Dict, Optional


class MorningReportError(Exception):
    """Base exception for the morning report pipeline."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MorningReportError):
    """Invalid or unusable configuration values."""
    pass


class ReportDeliveryError(MorningReportError):
    """The rendered report could not be emailed."""
    pass
