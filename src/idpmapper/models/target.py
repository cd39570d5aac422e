"""Resolution of the configured user attribute to a destination."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import EMAIL, FIRST_NAME, LAST_NAME
from .enums import TargetKind

__all__ = ["Target", "resolve_target"]

_RESERVED = {
    EMAIL.lower(): TargetKind.email,
    FIRST_NAME.lower(): TargetKind.first_name,
    LAST_NAME.lower(): TargetKind.last_name,
}


@dataclass(frozen=True, slots=True)
class Target:
    """Where a mapped attribute value is written on the user record."""

    kind: TargetKind
    """Whether this is one of the reserved fields or a generic attribute."""

    key: str
    """Configured user attribute, used as the key for generic attributes."""

    @property
    def is_reserved(self) -> bool:
        """Whether the target is a fixed user field."""
        return self.kind != TargetKind.attribute


def resolve_target(user_attribute: str) -> Target:
    """Resolve the configured user attribute to its destination.

    The names ``email``, ``firstName``, and ``lastName`` are matched
    case-insensitively and select the corresponding user field. Any other
    name is a key in the user's attribute bag.

    Parameters
    ----------
    user_attribute
        Configured user attribute name.

    Returns
    -------
    Target
        Resolved destination.

    Raises
    ------
    ValueError
        Raised if the user attribute is empty.
    """
    if not user_attribute:
        raise ValueError("User attribute must not be empty")
    kind = _RESERVED.get(user_attribute.lower(), TargetKind.attribute)
    return Target(kind=kind, key=user_attribute)
