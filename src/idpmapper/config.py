"""Configuration for the identity broker attribute importer.

The configuration is read from a YAML file listing the attribute mappers
attached to an identity provider. Settings with explicit environment variable
aliases may also be overridden from the environment, which takes precedence
over the configuration file.

Each mapper accepts both the dotted configuration keys used by the identity
broker's mapper configuration (``attribute.name``, for example) and the
camel-case equivalents more natural in YAML (``attributeName``).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Self, override

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, Profile, configure_logging

from .constants import (
    ATTRIBUTE_FRIENDLY_NAME,
    ATTRIBUTE_NAME,
    ATTRIBUTE_REGEX_MATCH,
    LOGGER_NAME,
    USER_ATTRIBUTE,
)
from .models.enums import SyncMode
from .models.metadata import ConfigProperty
from .models.target import Target, resolve_target

__all__ = [
    "Config",
    "EnvFirstSettings",
    "MapperConfig",
    "get_config_properties",
    "supports_sync_mode",
]


class MapperConfig(BaseModel):
    """Configuration for a single advanced attribute importer.

    Empty strings are treated the same as unset values, since that is how
    unset options are often represented by administrative interfaces.
    """

    model_config = ConfigDict(
        extra="forbid", frozen=True, populate_by_name=True
    )

    name: str | None = Field(
        None,
        title="Mapper name",
        description="Name of this mapper, used only for logging",
        examples=["department"],
    )

    attribute_name: str | None = Field(
        None,
        title="Attribute Name",
        description=(
            "Name of attribute to search for in assertion.  You can leave"
            " this blank and specify a friendly name instead."
        ),
        validation_alias=AliasChoices(ATTRIBUTE_NAME, "attributeName"),
    )

    friendly_name: str | None = Field(
        None,
        title="Friendly Name",
        description=(
            "Friendly name of attribute to search for in assertion.  You can"
            " leave this blank and specify a name instead."
        ),
        validation_alias=AliasChoices(ATTRIBUTE_FRIENDLY_NAME, "friendlyName"),
    )

    user_attribute: str | None = Field(
        None,
        title="User Attribute Name",
        description=(
            "User attribute name to store saml attribute.  Use email,"
            " lastName, and firstName to map to those predefined user"
            " properties."
        ),
        validation_alias=AliasChoices(USER_ATTRIBUTE, "userAttribute"),
    )

    attribute_regex: str = Field(
        "",
        title="Attribute Value Regex",
        description=(
            "The regex to match the attribute value against. For example:"
            " ^.*@example\\.com$"
        ),
        validation_alias=AliasChoices(ATTRIBUTE_REGEX_MATCH, "attributeRegex"),
    )

    sync_mode: SyncMode = Field(
        SyncMode.inherit,
        title="Sync mode",
        description=(
            "When to apply this mapper to existing users. ``inherit`` uses"
            " the default for the identity provider."
        ),
        validation_alias=AliasChoices("syncMode", "sync_mode"),
    )

    _pattern: re.Pattern[str] | None
    """Compiled form of ``attribute_regex``, if set."""

    _target: Target | None
    """Resolved form of ``user_attribute``, if set."""

    @field_validator(
        "name",
        "attribute_name",
        "friendly_name",
        "user_attribute",
        mode="before",
    )
    @classmethod
    def _validate_optional_string(cls, v: Any) -> Any:
        return v if v != "" else None

    @field_validator("attribute_regex", mode="before")
    @classmethod
    def _validate_regex(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, str) and v:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"invalid regex {v}: {e!s}") from e
        return v

    @override
    def model_post_init(self, context: Any, /) -> None:
        if self.attribute_regex:
            self._pattern = re.compile(self.attribute_regex)
        else:
            self._pattern = None
        if self.user_attribute:
            self._target = resolve_target(self.user_attribute)
        else:
            self._target = None

    @property
    def attribute_lookup_name(self) -> str | None:
        """Name used to find the attribute in the assertion.

        The attribute name takes precedence. The friendly name is only used
        if no attribute name was configured.
        """
        if self.attribute_name is not None:
            return self.attribute_name
        return self.friendly_name

    @property
    def pattern(self) -> re.Pattern[str] | None:
        """Compiled regex values must match, or `None` to accept anything."""
        return self._pattern

    @property
    def target(self) -> Target | None:
        """Destination for the attribute, or `None` if mapping is disabled."""
        return self._target

    @property
    def display_name(self) -> str:
        """Name of the mapper to use in log messages."""
        return self.name or self.attribute_lookup_name or "<unnamed>"


class EnvFirstSettings(BaseSettings):
    """Base class for settings with environment overrides.

    Classes that inherit from this base class will prioritize environment
    variables over arguments to the class constructor.
    """

    model_config = SettingsConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support. Allow environment
        variables to override init parameters, since init parameters come
        from the YAML configuration file.
        """
        return (env_settings, init_settings)


class Config(EnvFirstSettings):
    """Configuration for the mappers of one identity provider."""

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
        validation_alias=AliasChoices("IDPMAPPER_LOG_LEVEL", "logLevel"),
    )

    profile: Profile = Field(
        Profile.production,
        title="Logging profile",
        description="Whether to log in JSON or in human-readable format",
        validation_alias=AliasChoices("IDPMAPPER_PROFILE", "profile"),
    )

    sync_mode: SyncMode = Field(
        SyncMode.legacy,
        title="Default sync mode",
        description=(
            "Default sync mode of the identity provider, used by any mapper"
            " whose sync mode is ``inherit``"
        ),
        validation_alias=AliasChoices("IDPMAPPER_SYNC_MODE", "syncMode"),
    )

    mappers: list[MapperConfig] = Field(
        [],
        title="Attribute mappers",
        description="Attribute mappers, applied in order",
    )

    @model_validator(mode="after")
    def _validate_sync_mode(self) -> Self:
        """Ensure the identity provider default is a concrete mode."""
        if self.sync_mode == SyncMode.inherit:
            raise ValueError("syncMode of identity provider cannot be inherit")
        return self

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct a Config object from a configuration file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        Config
            The corresponding `Config` object.
        """
        with path.open("r") as f:
            return cls.model_validate(yaml.safe_load(f) or {})

    def configure_logging(self) -> None:
        """Configure logging based on the configuration."""
        configure_logging(
            name=LOGGER_NAME, profile=self.profile, log_level=self.log_level
        )

    def resolve_sync_mode(self, mapper: MapperConfig) -> SyncMode:
        """Return the effective sync mode of a mapper.

        Parameters
        ----------
        mapper
            Configuration of the mapper.

        Returns
        -------
        SyncMode
            Sync mode of the mapper, or the identity provider default if the
            mapper inherits it.
        """
        if mapper.sync_mode == SyncMode.inherit:
            return self.sync_mode
        return mapper.sync_mode


def get_config_properties() -> list[ConfigProperty]:
    """Describe the configuration options of an attribute mapper.

    Returns
    -------
    list of ConfigProperty
        Options in the order they should be presented to administrators.
    """
    fields = MapperConfig.model_fields
    properties = []
    for key, field_name in (
        (ATTRIBUTE_NAME, "attribute_name"),
        (ATTRIBUTE_FRIENDLY_NAME, "friendly_name"),
        (USER_ATTRIBUTE, "user_attribute"),
        (ATTRIBUTE_REGEX_MATCH, "attribute_regex"),
    ):
        field = fields[field_name]
        prop = ConfigProperty(
            name=key,
            label=field.title or key,
            help_text=field.description or "",
        )
        properties.append(prop)
    return properties


def supports_sync_mode(sync_mode: SyncMode) -> bool:
    """Whether the attribute mapper can be used with a sync mode.

    The attribute importer handles both first login and resync, so every
    sync mode is supported.
    """
    return sync_mode in SyncMode
