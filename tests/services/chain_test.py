"""Tests for the service applying all mappers of an identity provider."""

from __future__ import annotations

import pytest
from structlog.stdlib import BoundLogger

from idpmapper.config import Config
from idpmapper.exceptions import RegexMismatchError
from idpmapper.factory import Factory
from idpmapper.models.enums import SyncMode

from ..support.assertion import make_assertion
from ..support.user import RecordingUser

EMAIL_OID = "urn:oid:0.9.2342.19200300.100.1.3"


def test_import_identity(factory: Factory) -> None:
    chain = factory.create_mapper_chain_service()
    assertion = make_assertion(
        (EMAIL_OID, "mail", ["alice@example.com"]),
        ("urn:oid:2.5.4.42", "givenName", ["Alice"]),
        ("dept", None, ["ENG-01"]),
        ("memberOf", None, ["g_users", "g_admins"]),
    )
    identity = RecordingUser(username="alice")
    chain.import_identity(assertion, identity, username="alice")
    assert identity.email == "alice@example.com"
    assert identity.first_name == "Alice"
    assert identity.last_name is None
    assert identity.attributes == {
        "department": ["ENG-01"],
        "groups": ["g_users", "g_admins"],
    }


def test_import_identity_mismatch(factory: Factory) -> None:
    chain = factory.create_mapper_chain_service()
    assertion = make_assertion(
        (EMAIL_OID, "mail", ["alice@example.com"]),
        ("dept", None, ["SALES-01"]),
        ("memberOf", None, ["g_users"]),
    )
    identity = RecordingUser()
    with pytest.raises(RegexMismatchError) as excinfo:
        chain.import_identity(assertion, identity, username="alice")
    assert excinfo.value.user == "alice"
    assert excinfo.value.value == "SALES-01"

    # Mappers before the failing one have been applied, later ones have not.
    assert identity.changes == [("email", "alice@example.com")]


def test_update_user(factory: Factory) -> None:
    chain = factory.create_mapper_chain_service()
    assertion = make_assertion(
        (EMAIL_OID, "mail", ["alice@example.com"]),
        ("urn:oid:2.5.4.42", "givenName", ["Allie"]),
        ("memberOf", None, ["g_users"]),
    )
    user = RecordingUser(
        email="alice@example.com",
        first_name="Alice",
        attributes={"department": ["ENG-01"], "groups": ["g_old"]},
    )
    chain.update_user(assertion, user)

    # The groups mapper only applies on import.
    assert user.changes == [
        ("first_name", "Allie"),
        ("remove_attribute", "department"),
    ]
    assert user.attributes == {"groups": ["g_old"]}

    # A second update with the same data makes no changes.
    user.changes.clear()
    chain.update_user(assertion, user)
    assert user.changes == []


def test_update_user_import_only(
    config: Config, logger: BoundLogger
) -> None:
    config = config.model_copy(update={"sync_mode": SyncMode.import_})
    chain = Factory(config, logger).create_mapper_chain_service()
    assertion = make_assertion(("dept", None, ["ENG-02"]))
    user = RecordingUser(attributes={"department": ["ENG-01"]})
    chain.update_user(assertion, user)
    assert user.changes == []


def test_update_user_mismatch(factory: Factory) -> None:
    chain = factory.create_mapper_chain_service()
    assertion = make_assertion(
        (EMAIL_OID, "mail", ["alice@example.org"]),
        ("urn:oid:2.5.4.42", "givenName", ["Allie"]),
    )
    user = RecordingUser(email="alice@example.com", first_name="Alice")
    with pytest.raises(RegexMismatchError) as excinfo:
        chain.update_user(assertion, user, username="alice")
    assert excinfo.value.user == "alice"
    assert excinfo.value.attribute == "email"
    assert user.changes == []


def test_mismatch_record_username(factory: Factory) -> None:
    chain = factory.create_mapper_chain_service()
    assertion = make_assertion(("dept", None, ["SALES-01"]))
    identity = RecordingUser(username="alice")
    with pytest.raises(RegexMismatchError) as excinfo:
        chain.import_identity(assertion, identity)
    assert excinfo.value.user == "alice"

    user = RecordingUser(
        username="bob", attributes={"department": ["ENG-01"]}
    )
    with pytest.raises(RegexMismatchError) as excinfo:
        chain.update_user(assertion, user)
    assert excinfo.value.user == "bob"

    # An explicit username takes precedence over the record.
    with pytest.raises(RegexMismatchError) as excinfo:
        chain.update_user(assertion, user, username="robert")
    assert excinfo.value.user == "robert"
