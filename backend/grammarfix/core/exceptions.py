"""Grammar correction exceptions."""


class CorrectionError(Exception):
    """Base exception for correction service failures."""

    pass


class NetworkError(CorrectionError):
    """Raised when the API cannot be reached (connect, DNS, timeout)."""

    pass


class CorrectionApiError(CorrectionError):
    """Raised when the API answers with a non-success status or an error payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(CorrectionError):
    """Raised when a successful response carries no corrected text."""

    pass
