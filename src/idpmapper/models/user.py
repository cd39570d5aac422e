"""Models for the user record updated by the attribute importer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["BrokeredUser", "UserRecord"]


class UserRecord(Protocol):
    """Mutable handle to a user, owned by the persistence layer.

    During first login this is the brokered identity that will be used to
    create the user. During resync it is the stored user.
    """

    username: str | None
    email: str | None
    first_name: str | None
    last_name: str | None

    def get_attribute(self, name: str) -> list[str] | None:
        """Return the values of a user attribute, or `None` if not set."""

    def set_attribute(self, name: str, values: list[str]) -> None:
        """Replace the values of a user attribute."""

    def remove_attribute(self, name: str) -> None:
        """Remove a user attribute."""


@dataclass
class BrokeredUser:
    """In-memory user record.

    Used to represent a brokered identity before it is stored, or by callers
    whose persistence layer loads users into memory before updating them.
    """

    username: str | None = None
    """Username, if known, used to tag errors raised while updating."""

    email: str | None = None
    """Email address."""

    first_name: str | None = None
    """First (given) name."""

    last_name: str | None = None
    """Last (family) name."""

    attributes: dict[str, list[str]] = field(default_factory=dict)
    """Generic user attributes."""

    def get_attribute(self, name: str) -> list[str] | None:
        values = self.attributes.get(name)
        return list(values) if values is not None else None

    def set_attribute(self, name: str, values: list[str]) -> None:
        self.attributes[name] = list(values)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)
