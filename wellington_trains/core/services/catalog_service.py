"""
Catalog Service Implementation

Read-only queries over a loaded catalog.
"""

import logging
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..interfaces.i_catalog_service import ICatalogService
from ..models.catalog import Catalog
from ..models.station import Station
from ..models.train_line import TrainLine
from ..models.train_service import TrainService


def _by_name(item) -> str:
    return item.name


class CatalogService(ICatalogService):
    """Service implementation for catalog queries."""

    def __init__(self, catalog: Catalog):
        """
        Initialize the catalog service.

        Args:
            catalog: Loaded, sealed catalog
        """
        self.catalog = catalog
        self.logger = logging.getLogger(__name__)

        self.logger.info(f"Initialized CatalogService over {catalog!r}")

    def get_station(self, name: str) -> Optional[Station]:
        """Get a station by name, or None if unknown."""
        return self.catalog.get_station(name)

    def get_line(self, name: str) -> Optional[TrainLine]:
        """Get a line by name, or None if unknown."""
        return self.catalog.get_line(name)

    def station_names(self) -> List[str]:
        return sorted(self.catalog.stations)

    def line_names(self) -> List[str]:
        return sorted(self.catalog.lines)

    def list_stations(self) -> List[Station]:
        return sorted(self.catalog.stations.values(), key=_by_name)

    def list_lines(self) -> List[TrainLine]:
        return sorted(self.catalog.lines.values(), key=_by_name)

    def lines_at_station(self, name: str) -> Optional[FrozenSet[TrainLine]]:
        station = self.catalog.get_station(name)
        if station is None:
            self.logger.warning(f"Unknown station requested: {name}")
            return None
        return station.train_lines

    def stations_on_line(self, name: str) -> Optional[List[Station]]:
        line = self.catalog.get_line(name)
        if line is None:
            self.logger.warning(f"Unknown train line requested: {name}")
            return None
        return line.stations

    def services_on_line(self, name: str) -> Optional[List[TrainService]]:
        line = self.catalog.get_line(name)
        if line is None:
            self.logger.warning(f"Unknown train line requested: {name}")
            return None
        return line.services

    def route_exists(self, from_name: str, to_name: str) -> Optional[bool]:
        from_lines = self.lines_at_station(from_name)
        to_lines = self.lines_at_station(to_name)
        if from_lines is None or to_lines is None:
            return None

        # Exact equality of line sets, not intersection; see find_common_lines.
        return from_lines == to_lines

    def route_lines(self, from_name: str, to_name: str) -> Optional[List[TrainLine]]:
        """
        Get the lines to report for a planned route.

        Args:
            from_name: Origin station name
            to_name: Destination station name

        Returns:
            The lines serving the origin, sorted by name, when a route exists;
            an empty list when it does not or when no line serves either
            station; None if either station is unknown. Use route_exists to
            tell the two empty cases apart
        """
        exists = self.route_exists(from_name, to_name)
        if exists is None:
            return None
        if not exists:
            return []
        return sorted(self.catalog.stations[from_name].train_lines, key=_by_name)

    def find_common_lines(self, from_name: str, to_name: str) -> Optional[List[str]]:
        from_lines = self.lines_at_station(from_name)
        to_lines = self.lines_at_station(to_name)
        if from_lines is None or to_lines is None:
            return None
        return sorted(line.name for line in from_lines & to_lines)

    def station_line_index(self) -> Dict[str, List[str]]:
        """
        Map every station name to the names of the lines serving it.

        Returns:
            Dictionary keyed by station name, values sorted by line name
        """
        return {station.name: station.line_names for station in self.list_stations()}

    def services_at_station(self, name: str) -> Optional[Dict[str, List[TrainService]]]:
        lines = self.lines_at_station(name)
        if lines is None:
            return None
        return {line.name: line.services for line in sorted(lines, key=_by_name)}

    def lines_by_station(self) -> List[Tuple[Station, List[TrainLine]]]:
        return [
            (station, sorted(station.train_lines, key=_by_name))
            for station in self.list_stations()
        ]

    def stations_by_line(self) -> List[Tuple[TrainLine, List[Station]]]:
        return [(line, line.stations) for line in self.list_lines()]

    def get_catalog_statistics(self) -> Dict[str, int]:
        """Get counts of the loaded records."""
        return {
            'stations': len(self.catalog.stations),
            'train_lines': len(self.catalog.lines),
            'services': len(self.catalog.services),
        }
