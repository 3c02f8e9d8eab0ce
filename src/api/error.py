from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """A use case error the caller is told about (4xx)."""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    @property
    def log_detail(self) -> str:
        detail = f"{self.status_code} {self.base_error.code}: {self.base_error.message}"
        if self.base_error.reason:
            detail += f" ({self.base_error.reason})"
        return detail


class ServerError(Exception):
    """A use case error with no client-facing mapping; rendered as a generic 500."""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
