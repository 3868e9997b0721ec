"""Error taxonomy for the satire service.

Client-input defects (`ValidationError`, `MethodNotAllowed`) are raised and
mapped to 4xx statuses by the orchestrator. `UpstreamError` is raised by the
text generator and converted into a `Failure` value by the bounded generator;
it never reaches the caller as an error status.
"""


class SatireServiceError(Exception):
    """Base class for errors raised inside the service."""


class ValidationError(SatireServiceError):
    """Raised when a request cannot be normalized (for example, empty word)."""

    status_code = 400


class MethodNotAllowed(SatireServiceError):
    """Raised for any inbound method other than POST."""

    status_code = 405


class UpstreamError(SatireServiceError):
    """Transport failure or non-success status from the generation provider.

    Attributes:
        status_code: Provider HTTP status, or `None` for transport failures.
    """

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
