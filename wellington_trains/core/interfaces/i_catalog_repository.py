"""
Catalog Repository Interface

Interface for loading the railway catalog from a data source.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.catalog import Catalog
from ..models.station import Station


class ICatalogRepository(ABC):
    """Interface for catalog loading operations."""

    @abstractmethod
    def load_catalog(self) -> Catalog:
        """
        Load the complete, cross-linked catalog.

        Returns:
            Sealed Catalog

        Raises:
            CatalogLoadError: If any file is missing or malformed
        """
        pass

    @abstractmethod
    def load_stations(self) -> List[Station]:
        """
        Load all stations from the data source.

        Returns:
            List of unlinked Station objects in file order
        """
        pass

    @abstractmethod
    def load_line_names(self) -> List[str]:
        """
        Load the declared line names.

        Returns:
            List of line names in file order
        """
        pass
