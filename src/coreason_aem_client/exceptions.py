from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from coreason_aem_client.domain.response import Result


class AemClientError(Exception):
    """Base exception for Coreason AEM Client."""

    def __init__(self, message: str, result: Optional["Result"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.result = result


class TransportError(AemClientError):
    """Exception raised by a transport when the request could not be completed (timeouts, connection refused)."""

    pass


class UnknownOperationError(AemClientError):
    """Exception raised when an operation kind has no declared specification."""

    pass


class UnexpectedResponseError(AemClientError):
    """Exception raised when AEM responds with a status code the operation does not declare."""

    pass


class ResponseParseError(AemClientError):
    """Exception raised when a response body lacks content the operation requires."""

    pass


class OperationError(AemClientError):
    """Exception raised when AEM reports that an operation definitely failed."""

    pass


class ConvergenceError(AemClientError):
    """Exception raised when a status check never converged within the retry policy."""

    pass
