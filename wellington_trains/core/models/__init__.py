"""
Core Models Package

Data models for stations, lines, services and the loaded catalog.
"""

from .station import Station, CatalogSealedError
from .train_service import TrainService, format_time, is_valid_time
from .train_line import TrainLine
from .catalog import Catalog

__all__ = [
    'Station',
    'CatalogSealedError',
    'TrainService',
    'format_time',
    'is_valid_time',
    'TrainLine',
    'Catalog'
]
