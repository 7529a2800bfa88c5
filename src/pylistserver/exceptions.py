"""Custom exception hierarchy for pylistserver."""

from __future__ import annotations


class ListServerError(Exception):
    """Base exception for all pylistserver errors."""


class ListConfigError(ListServerError):
    """Invalid or missing configuration."""


class ListValidationError(ListServerError):
    """A request body was rejected by the store's validation rules."""


class InvalidOrderError(ListValidationError):
    """Submitted order is not a permutation of all item ids."""


class InvalidSelectionError(ListValidationError):
    """Submitted selection references ids that do not exist."""


class ListTransportError(ListServerError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)
