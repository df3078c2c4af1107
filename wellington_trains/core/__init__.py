"""
Core Package

Models, interfaces and services for the Wellington train catalog.
"""

# Import interfaces
from .interfaces import ICatalogRepository, ICatalogService

# Import models
from .models import Station, TrainLine, TrainService, Catalog, CatalogSealedError, format_time

# Import services
from .services import FlatFileRepository, CatalogLoadError, CatalogService, ServiceFactory

__all__ = [
    # Interfaces
    'ICatalogRepository',
    'ICatalogService',

    # Models
    'Station',
    'TrainLine',
    'TrainService',
    'Catalog',
    'CatalogSealedError',
    'format_time',

    # Services
    'FlatFileRepository',
    'CatalogLoadError',
    'CatalogService',
    'ServiceFactory'
]
