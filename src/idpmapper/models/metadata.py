"""Models describing the mapper configuration to administrators."""

from __future__ import annotations

from pydantic import BaseModel, Field

__all__ = ["ConfigProperty"]


class ConfigProperty(BaseModel):
    """Description of one configuration option of the mapper."""

    name: str = Field(
        ...,
        title="Configuration key",
        examples=["attribute.name"],
    )

    label: str = Field(..., title="Label", examples=["Attribute Name"])

    help_text: str = Field(..., title="Help text")

    type: str = Field("String", title="Type of the option")
