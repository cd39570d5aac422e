"""Tests for the component factory."""

from __future__ import annotations

import pytest
from safir.testing.logging import parse_log_tuples

from idpmapper.config import Config, MapperConfig
from idpmapper.exceptions import RegexMismatchError
from idpmapper.factory import Factory

from .support.assertion import make_assertion
from .support.config import config_path
from .support.user import RecordingUser


def test_from_file() -> None:
    factory = Factory.from_file(config_path("mappers"))
    chain = factory.create_mapper_chain_service()
    assertion = make_assertion(("dept", None, ["ENG-01"]))
    user = RecordingUser()
    chain.import_identity(assertion, user)
    assert user.attributes == {"department": ["ENG-01"]}


def test_logging(factory: Factory, caplog: pytest.LogCaptureFixture) -> None:
    mapper = MapperConfig(
        name="department",
        attribute_name="dept",
        user_attribute="department",
        attribute_regex="^ENG.*",
    )
    importer = factory.create_attribute_importer(mapper)
    user = RecordingUser()

    caplog.clear()
    importer.preprocess_federated_identity(
        make_assertion(("dept", None, ["ENG-01"])), user
    )
    importer.update_brokered_user(
        make_assertion(("dept", None, ["ENG-02"])), user
    )
    importer.update_brokered_user(make_assertion(), user)
    with pytest.raises(RegexMismatchError):
        importer.update_brokered_user(
            make_assertion(("dept", None, ["SALES-01"])), user
        )

    base = {"mapper": "department", "user_attribute": "department"}
    assert parse_log_tuples(
        "idpmapper", caplog.record_tuples, ignore_debug=True
    ) == [
        {
            "event": "Imported user attribute",
            "severity": "info",
            "values": ["ENG-01"],
            **base,
        },
        {
            "event": "Updated user attribute",
            "severity": "info",
            "values": ["ENG-02"],
            **base,
        },
        {
            "event": "Removed user attribute",
            "severity": "info",
            **base,
        },
        {
            "event": "Attribute value does not match regex",
            "regex": "^ENG.*",
            "severity": "warning",
            "value": "SALES-01",
            **base,
        },
    ]


def test_unnamed_mapper(caplog: pytest.LogCaptureFixture) -> None:
    config = Config(mappers=[MapperConfig(user_attribute="department")])
    caplog.clear()
    Factory(config).create_mapper_chain_service()
    assert parse_log_tuples("idpmapper", caplog.record_tuples) == [
        {
            "event": "Mapper has no attribute name and will never match",
            "mapper": "<unnamed>",
            "severity": "warning",
            "user_attribute": "department",
        }
    ]
