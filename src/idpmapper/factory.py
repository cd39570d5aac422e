"""Create attribute importer components."""

from __future__ import annotations

from pathlib import Path
from typing import Self

import structlog
from structlog.stdlib import BoundLogger

from .config import Config, MapperConfig
from .constants import LOGGER_NAME
from .services.chain import MapperChainService
from .services.importer import AttributeImporterService

__all__ = ["Factory"]


class Factory:
    """Build attribute importer components.

    Parameters
    ----------
    config
        Configuration of the identity provider mappers.
    logger
        Logger to use. If not given, the default ``idpmapper`` logger is
        used.
    """

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Create a component factory from a configuration file.

        Logging is configured based on the settings in that file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        Factory
            Newly-created factory.
        """
        config = Config.from_file(path)
        config.configure_logging()
        return cls(config)

    def __init__(
        self, config: Config, logger: BoundLogger | None = None
    ) -> None:
        self._config = config
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    def create_attribute_importer(
        self, mapper: MapperConfig
    ) -> AttributeImporterService:
        """Create an attribute importer for a single mapper.

        Parameters
        ----------
        mapper
            Configuration of the mapper.

        Returns
        -------
        AttributeImporterService
            Newly created service.
        """
        logger = self._logger.bind(
            mapper=mapper.display_name, user_attribute=mapper.user_attribute
        )
        if mapper.user_attribute and not mapper.attribute_lookup_name:
            logger.warning("Mapper has no attribute name and will never match")
        return AttributeImporterService(config=mapper, logger=logger)

    def create_mapper_chain_service(self) -> MapperChainService:
        """Create a service that applies every configured mapper.

        Returns
        -------
        MapperChainService
            Newly created service.
        """
        importers = [
            self.create_attribute_importer(m) for m in self._config.mappers
        ]
        return MapperChainService(
            config=self._config, importers=importers, logger=self._logger
        )
