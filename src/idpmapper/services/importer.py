"""Service layer for importing assertion attributes into users."""

from __future__ import annotations

from structlog.stdlib import BoundLogger

from ..config import MapperConfig
from ..exceptions import RegexMismatchError
from ..models.assertion import Assertion
from ..models.enums import TargetKind
from ..models.target import Target
from ..models.user import UserRecord
from ..util import value_matches_regex

__all__ = ["AttributeImporterService"]


class AttributeImporterService:
    """Import one attribute from an assertion into a user.

    The attribute is located in the assertion by name or friendly name, its
    first value is checked against the configured regex, and it is then
    written to the configured user field or attribute. How it is written
    depends on whether this is the first login of a brokered identity or a
    resync of an existing user.

    Parameters
    ----------
    config
        Configuration of this mapper.
    logger
        Logger to use.
    """

    def __init__(self, *, config: MapperConfig, logger: BoundLogger) -> None:
        self._config = config
        self._logger = logger

    @property
    def config(self) -> MapperConfig:
        """Configuration of this mapper."""
        return self._config

    def preprocess_federated_identity(
        self, assertion: Assertion, identity: UserRecord
    ) -> None:
        """Import the attribute into a newly brokered identity.

        Values are written unconditionally. Nothing is done if mapping is
        disabled or the attribute is not present in the assertion.

        Parameters
        ----------
        assertion
            Assertion from the identity provider.
        identity
            Brokered identity to update.

        Raises
        ------
        RegexMismatchError
            Raised if the first value of the attribute does not match the
            configured regex. The identity will not have been modified.
        """
        target = self._config.target
        if not target:
            return
        values = self._find_values(assertion)
        if not values:
            return
        self._check_regex(values[0], target)

        logger = self._logger.bind(values=values)
        if target.kind == TargetKind.email:
            identity.email = values[0]
        elif target.kind == TargetKind.first_name:
            identity.first_name = values[0]
        elif target.kind == TargetKind.last_name:
            identity.last_name = values[0]
        else:
            identity.set_attribute(target.key, values)
        logger.info("Imported user attribute")

    def update_brokered_user(
        self, assertion: Assertion, user: UserRecord
    ) -> None:
        """Update an existing user from the attribute.

        Only values that have changed are written, so repeating an update
        with the same assertion makes no changes. A generic attribute that is
        no longer present in the assertion is removed from the user.

        Parameters
        ----------
        assertion
            Assertion from the identity provider.
        user
            Existing user to update.

        Raises
        ------
        RegexMismatchError
            Raised if the first value of the attribute does not match the
            configured regex. The user will not have been modified.
        """
        target = self._config.target
        if not target:
            return
        values = self._find_values(assertion)

        # The regex can only be checked if there is a value. If there isn't,
        # the identity provider no longer sends this attribute.
        if not values:
            if target.is_reserved:
                return
            if user.get_attribute(target.key) is not None:
                user.remove_attribute(target.key)
                self._logger.info("Removed user attribute")
            return
        self._check_regex(values[0], target)

        logger = self._logger.bind(values=values)
        if target.kind == TargetKind.email:
            if user.email == values[0]:
                return
            user.email = values[0]
        elif target.kind == TargetKind.first_name:
            if user.first_name == values[0]:
                return
            user.first_name = values[0]
        elif target.kind == TargetKind.last_name:
            if user.last_name == values[0]:
                return
            user.last_name = values[0]
        else:
            current = user.get_attribute(target.key)
            if current == values:
                return
            user.set_attribute(target.key, values)
        logger.info("Updated user attribute")

    def _check_regex(self, value: str, target: Target) -> None:
        """Check a value against the configured regex.

        Raises
        ------
        RegexMismatchError
            Raised if the value does not match.
        """
        if value_matches_regex(self._config.pattern, value):
            return
        regex = self._config.attribute_regex
        self._logger.warning(
            "Attribute value does not match regex", value=value, regex=regex
        )
        raise RegexMismatchError(value, regex, target.key)

    def _find_values(self, assertion: Assertion) -> list[str]:
        """Find the values of the configured attribute in an assertion."""
        name = self._config.attribute_lookup_name
        values = assertion.find_attribute_values(name)
        if not values:
            self._logger.debug("Attribute not found in assertion", name=name)
        return values
