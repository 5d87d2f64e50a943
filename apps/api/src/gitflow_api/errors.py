"""API error type carrying envelope fields."""

from fastapi import HTTPException


class ApiError(HTTPException):
    """HTTP error rendered as a failure envelope.

    ``detail`` becomes the envelope message and ``error`` its error detail.
    """

    def __init__(self, status_code: int, message: str, error: str | None = None) -> None:
        super().__init__(status_code=status_code, detail=message)
        self.error = error
