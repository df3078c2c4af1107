"""
Core Services Package

Service implementations for loading and querying the catalog.
"""

from .flat_file_repository import FlatFileRepository, CatalogLoadError
from .catalog_service import CatalogService
from .service_factory import ServiceFactory

__all__ = [
    'FlatFileRepository',
    'CatalogLoadError',
    'CatalogService',
    'ServiceFactory'
]
