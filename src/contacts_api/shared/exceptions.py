"""
Shared exceptions mapped to HTTP responses in ``contacts_api.main``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    message: str = "Application error"
    details: Optional[dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    pass


class ValidationError(AppError):
    pass


@dataclass
class StoreError(AppError):
    """Raised when the persistence store fails to complete an operation."""

    message: str = "Server error"
    error: str = ""
