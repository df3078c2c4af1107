"""
Service Factory

Factory for creating the catalog repository and query service.
"""

import logging
from typing import Optional

from ..interfaces.i_catalog_repository import ICatalogRepository
from ..models.catalog import Catalog
from .catalog_service import CatalogService
from .flat_file_repository import FlatFileRepository


class ServiceFactory:
    """Factory for creating and wiring core service instances."""

    def __init__(self, data_directory: Optional[str] = None):
        """
        Initialize the service factory.

        Args:
            data_directory: Path to data directory, defaults to the bundled data
        """
        self.logger = logging.getLogger(__name__)
        self.data_directory = data_directory
        self._data_repository: Optional[ICatalogRepository] = None

        self.logger.info(f"Initialized ServiceFactory with data directory: {data_directory or '<bundled>'}")

    def get_data_repository(self) -> ICatalogRepository:
        """Get or create the data repository instance."""
        if self._data_repository is None:
            self._data_repository = FlatFileRepository(self.data_directory)
            self.logger.info("Created FlatFileRepository instance")

        return self._data_repository

    def load_catalog(self) -> Catalog:
        """
        Load the catalog through the data repository.

        Raises:
            CatalogLoadError: If loading fails
        """
        return self.get_data_repository().load_catalog()

    def create_catalog_service(self, catalog: Optional[Catalog] = None) -> CatalogService:
        """
        Create a query service over a catalog.

        Args:
            catalog: Already loaded catalog; loaded now if not given

        Returns:
            CatalogService bound to the catalog
        """
        if catalog is None:
            catalog = self.load_catalog()
        return CatalogService(catalog)
