"""Models for attributes of a federated assertion."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "Assertion",
    "AssertionAttribute",
    "AttributeStatement",
]


class AssertionAttribute(BaseModel):
    """A single named attribute from an assertion."""

    model_config = ConfigDict(
        alias_generator=to_camel, frozen=True, populate_by_name=True
    )

    name: str = Field(
        ...,
        title="Attribute name",
        examples=["urn:oid:0.9.2342.19200300.100.1.3"],
    )

    friendly_name: str | None = Field(
        None,
        title="Friendly name",
        description="Human-readable alias for the attribute",
        examples=["mail"],
    )

    values: list[Any] = Field(
        [],
        title="Attribute values",
        description="Values in assertion order, which may include nulls",
        examples=[["alice@example.com"]],
    )

    def matches(self, attribute_name: str) -> bool:
        """Whether this attribute has the given name or friendly name."""
        return attribute_name in (self.name, self.friendly_name)


class AttributeStatement(BaseModel):
    """An attribute statement holding zero or more attributes."""

    model_config = ConfigDict(frozen=True)

    attributes: list[AssertionAttribute] = Field(
        [], title="Attributes in this statement"
    )


class Assertion(BaseModel):
    """The attribute statements of an assertion from an identity provider.

    Only the attribute statements are represented. Parsing and verifying the
    assertion itself is done by the caller.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, frozen=True, populate_by_name=True
    )

    attribute_statements: list[AttributeStatement] = Field(
        [], title="Attribute statements"
    )

    @classmethod
    def from_attributes(
        cls, attributes: Mapping[str, Sequence[Any]]
    ) -> Self:
        """Build an assertion with a single statement from a mapping.

        This matches the attribute value assertion dictionary produced by
        common SAML libraries, which maps attribute names to their values.

        Parameters
        ----------
        attributes
            Mapping of attribute names to lists of values.

        Returns
        -------
        Assertion
            Corresponding assertion.
        """
        statement = AttributeStatement(
            attributes=[
                AssertionAttribute(name=k, values=list(v))
                for k, v in attributes.items()
            ]
        )
        return cls(attribute_statements=[statement])

    def find_attribute_values(self, attribute_name: str | None) -> list[str]:
        """Find all values of an attribute.

        An attribute matches if either its name or its friendly name is
        exactly equal to ``attribute_name``. Values of every matching
        attribute are collected in assertion order. Null values are skipped
        and all other values are converted to strings.

        Parameters
        ----------
        attribute_name
            Name or friendly name of the attribute to find.

        Returns
        -------
        list of str
            Values found, which will be empty if the attribute was not
            present or ``attribute_name`` was empty.
        """
        if not attribute_name:
            return []
        return [
            str(value)
            for statement in self.attribute_statements
            for attribute in statement.attributes
            if attribute.matches(attribute_name)
            for value in attribute.values
            if value is not None
        ]
