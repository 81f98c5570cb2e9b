"""Exceptions raised by the GO-CAM analysis core.

Only MalformedModel and DocumentError ever reach a caller. LookupMiss is
raised by the model graph and recovered by the hole detector, which reports
the unresolved id as a finding.
"""


class GoCamAnalysisError(Exception):
    """Base exception for all gocam-analysis errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details


class LookupMiss(GoCamAnalysisError, KeyError):
    """Raised when an activity id does not resolve within a model.

    Attributes:
        activity_id: The id that could not be resolved
    """

    def __init__(self, activity_id: str):
        super().__init__(
            f"Activity not found: {activity_id}",
            details={"activity_id": activity_id},
        )
        self.activity_id = activity_id

    def __str__(self) -> str:
        return self.message


class MalformedModel(GoCamAnalysisError):
    """Raised when a model breaks a shape invariant no finding can represent."""

    pass


class DocumentError(GoCamAnalysisError):
    """Raised when a GO-CAM document cannot be parsed into the expected shape."""

    pass
