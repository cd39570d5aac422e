"""Service layer for running all mappers of an identity provider."""

from __future__ import annotations

from structlog.stdlib import BoundLogger

from ..config import Config
from ..exceptions import IdentityBrokerError
from ..models.assertion import Assertion
from ..models.enums import SyncMode
from ..models.user import UserRecord
from .importer import AttributeImporterService

__all__ = ["MapperChainService"]


class MapperChainService:
    """Apply every configured attribute mapper to a user.

    Mappers are applied in configuration order. The first error aborts
    processing, leaving the changes of any earlier mappers in place, since
    the broker is expected to abort the whole login when that happens.

    Parameters
    ----------
    config
        Identity provider configuration.
    importers
        Attribute importers, one per configured mapper.
    logger
        Logger to use.
    """

    def __init__(
        self,
        *,
        config: Config,
        importers: list[AttributeImporterService],
        logger: BoundLogger,
    ) -> None:
        self._config = config
        self._importers = importers
        self._logger = logger

    def import_identity(
        self,
        assertion: Assertion,
        identity: UserRecord,
        *,
        username: str | None = None,
    ) -> None:
        """Apply all mappers to a newly brokered identity.

        Parameters
        ----------
        assertion
            Assertion from the identity provider.
        identity
            Brokered identity to update.
        username
            Username to attach to errors. Defaults to the username of the
            identity record.

        Raises
        ------
        IdentityBrokerError
            Raised if any mapper rejected the assertion.
        """
        for importer in self._importers:
            try:
                importer.preprocess_federated_identity(assertion, identity)
            except IdentityBrokerError as e:
                e.user = username or identity.username
                raise

    def update_user(
        self,
        assertion: Assertion,
        user: UserRecord,
        *,
        username: str | None = None,
    ) -> None:
        """Apply all mappers to an existing user.

        Mappers whose effective sync mode is ``import`` only apply on first
        login and are skipped.

        Parameters
        ----------
        assertion
            Assertion from the identity provider.
        user
            Existing user to update.
        username
            Username to attach to errors. Defaults to the username of the
            user record.

        Raises
        ------
        IdentityBrokerError
            Raised if any mapper rejected the assertion.
        """
        for importer in self._importers:
            sync_mode = self._config.resolve_sync_mode(importer.config)
            if sync_mode == SyncMode.import_:
                self._logger.debug(
                    "Skipping mapper for existing user",
                    mapper=importer.config.display_name,
                    sync_mode=sync_mode.value,
                )
                continue
            try:
                importer.update_brokered_user(assertion, user)
            except IdentityBrokerError as e:
                e.user = username or user.username
                raise
