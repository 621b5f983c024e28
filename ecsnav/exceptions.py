"""Exception hierarchy for ecsnav.

Hierarchy:
    EcsNavError (base)
    ├── PageStackError (page registry misuse)
    │   ├── DuplicateKeyError
    │   └── UnknownPageError
    ├── ProviderError (remote listing/describe call failed)
    ├── ConsistencyError (internal invariant violated)
    ├── UnsupportedOperationError (action exists but is not implemented)
    └── ConfigError (settings)
        └── ConfigLoadError

Usage:
    from ecsnav.exceptions import ProviderError

    try:
        response = ecs.list_clusters()
    except (ClientError, BotoCoreError) as e:
        raise ProviderError(service="ecs", operation="ListClusters", cause=e) from e
"""

from __future__ import annotations

from typing import Any


class EcsNavError(Exception):
    """Base class for all ecsnav errors.

    Attributes:
        message: Human readable message
        cause: Underlying exception, if any
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
        }


# =============================================================================
# Page registry
# =============================================================================


class PageStackError(EcsNavError):
    """Invalid operation on the page registry."""


class DuplicateKeyError(PageStackError):
    """A page with the same key is already registered."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Page already exists: {key!r}")
        self.key = key


class UnknownPageError(PageStackError):
    """No page is registered under the given key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown page: {key!r}")
        self.key = key


# =============================================================================
# Navigation
# =============================================================================


class ProviderError(EcsNavError):
    """A remote listing or describe call failed."""

    def __init__(
        self,
        operation: str,
        cause: Exception | None = None,
        service: str = "",
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"{operation} failed", cause)
        self.service = service
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["service"] = self.service
        data["operation"] = self.operation
        return data


class ConsistencyError(EcsNavError):
    """Navigation state and displayed lists went out of sync."""


class UnsupportedOperationError(EcsNavError):
    """The requested action is not available."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        super().__init__(message or f"{operation} is not supported yet")
        self.operation = operation


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(EcsNavError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConsistencyError",
    "DuplicateKeyError",
    "EcsNavError",
    "PageStackError",
    "ProviderError",
    "UnknownPageError",
    "UnsupportedOperationError",
]
