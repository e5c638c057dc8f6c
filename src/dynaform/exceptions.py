"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class ConfigurationError(PackageError):
    """Raised when the form mount target cannot be resolved."""

    mount_target_id: str
    message: str = "Mount target not found"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: '{self.mount_target_id}'"


@dataclass(frozen=True)
class MalformedFieldError(PackageError):
    """Raised when a field descriptor is missing mandatory attributes or is invalid for its kind."""

    reason: str
    identifier: str | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        if self.identifier:
            return f"Malformed field '{self.identifier}': {self.reason}"
        return f"Malformed field: {self.reason}"


@dataclass(frozen=True)
class RuleNotFoundError(PackageError):
    """Raised when a rule catalog lookup fails."""

    category: str
    name: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"No rule named '{self.name}' in category '{self.category}'"
