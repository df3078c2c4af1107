"""
Core Interfaces Package

Interface definitions for the catalog loader and query services.
"""

from .i_catalog_repository import ICatalogRepository
from .i_catalog_service import ICatalogService

__all__ = [
    'ICatalogRepository',
    'ICatalogService'
]
