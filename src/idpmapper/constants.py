"""Constants for the identity broker attribute importer."""

__all__ = [
    "ATTRIBUTE_FRIENDLY_NAME",
    "ATTRIBUTE_NAME",
    "ATTRIBUTE_REGEX_MATCH",
    "COMPATIBLE_PROVIDERS",
    "DISPLAY_CATEGORY",
    "DISPLAY_TYPE",
    "EMAIL",
    "FIRST_NAME",
    "HELP_TEXT",
    "LAST_NAME",
    "LOGGER_NAME",
    "PROVIDER_ID",
    "USER_ATTRIBUTE",
]

ATTRIBUTE_NAME = "attribute.name"
"""Configuration key for the name of the assertion attribute."""

ATTRIBUTE_FRIENDLY_NAME = "attribute.friendly.name"
"""Configuration key for the friendly name of the assertion attribute."""

ATTRIBUTE_REGEX_MATCH = "attribute.regex.match"
"""Configuration key for the regex the attribute value must match."""

USER_ATTRIBUTE = "user.attribute"
"""Configuration key for the user field or attribute to store the value."""

EMAIL = "email"
"""Reserved target that maps to the user's email address."""

FIRST_NAME = "firstName"
"""Reserved target that maps to the user's first name."""

LAST_NAME = "lastName"
"""Reserved target that maps to the user's last name."""

PROVIDER_ID = "saml-advanced-user-attribute-idp-mapper"
"""Identifier of this mapper type."""

COMPATIBLE_PROVIDERS = ("saml",)
"""Identity provider types this mapper can be attached to."""

DISPLAY_CATEGORY = "Advanced Attribute Importer"
"""Category under which the mapper is listed."""

DISPLAY_TYPE = "Advanced Attribute Importer"
"""Human-readable name of the mapper type."""

HELP_TEXT = (
    "Import declared saml attribute if it exists in assertion into the"
    " specified user property or attribute."
)
"""Description of the mapper shown to administrators."""

LOGGER_NAME = "idpmapper"
"""Name of the logger used for all log messages."""
