"""Enums used in the attribute importer models."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "SyncMode",
    "TargetKind",
]


class SyncMode(Enum):
    """When user data from the identity provider is applied to a user."""

    inherit = "inherit"
    """Use the default sync mode of the identity provider."""

    legacy = "legacy"
    """Import on first login and update on every later login."""

    import_ = "import"
    """Import on first login only and never update afterwards."""

    force = "force"
    """Import on first login and always update on later logins."""


class TargetKind(Enum):
    """Destination of a mapped attribute value on the user record."""

    email = "email"
    first_name = "firstName"
    last_name = "lastName"
    attribute = "attribute"
