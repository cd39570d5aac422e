"""Exceptions for the identity broker attribute importer."""

from __future__ import annotations

from typing import override

from safir.slack.blockkit import SlackException, SlackMessage, SlackTextField

__all__ = [
    "IdentityBrokerError",
    "RegexMismatchError",
]


class IdentityBrokerError(SlackException):
    """Brokering of a federated identity must be aborted.

    The broker is expected to stop the login, link, or resync flow and
    report the error. This is a `~safir.slack.blockkit.SlackException` so
    that the broker can report it with the user attached if it wishes.
    """


class RegexMismatchError(IdentityBrokerError):
    """The attribute value did not match the configured regex.

    Parameters
    ----------
    value
        Attribute value from the assertion that was checked.
    regex
        Regular expression the value was required to match.
    attribute
        Name of the user field or attribute that would have been set.
    user
        Identity of the user being brokered, if known.
    """

    def __init__(
        self,
        value: str,
        regex: str,
        attribute: str | None = None,
        user: str | None = None,
    ) -> None:
        msg = (
            "Regex didn't match during IDP brokering for attribute:"
            f" {value}, with regex {regex}"
        )
        super().__init__(msg, user)
        self.value = value
        self.regex = regex
        self.attribute = attribute

    @override
    def to_slack(self) -> SlackMessage:
        message = super().to_slack()
        if self.attribute:
            field = SlackTextField(heading="Attribute", text=self.attribute)
            message.fields.append(field)
        message.fields.append(SlackTextField(heading="Regex", text=self.regex))
        return message
