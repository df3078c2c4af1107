"""
Catalog Service Interface

Defines the read-only query contract used by the presentation layer.
Every lookup by name returns None for an unknown name.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..models.station import Station
from ..models.train_line import TrainLine
from ..models.train_service import TrainService


class ICatalogService(ABC):
    """Interface for catalog queries."""

    @abstractmethod
    def list_stations(self) -> List[Station]:
        """
        Get all stations.

        Returns:
            Stations sorted by name
        """
        pass

    @abstractmethod
    def list_lines(self) -> List[TrainLine]:
        """
        Get all lines.

        Returns:
            Lines sorted by name
        """
        pass

    @abstractmethod
    def lines_at_station(self, name: str) -> Optional[FrozenSet[TrainLine]]:
        """
        Get the lines serving a station.

        Args:
            name: Station name

        Returns:
            Set of lines, or None if the station is unknown
        """
        pass

    @abstractmethod
    def stations_on_line(self, name: str) -> Optional[List[Station]]:
        """
        Get the stations visited by a line.

        Args:
            name: Line name

        Returns:
            Stations in travel order, or None if the line is unknown
        """
        pass

    @abstractmethod
    def services_on_line(self, name: str) -> Optional[List[TrainService]]:
        """
        Get the services running on a line.

        Args:
            name: Line name

        Returns:
            Services in file order, or None if the line is unknown
        """
        pass

    @abstractmethod
    def route_exists(self, from_name: str, to_name: str) -> Optional[bool]:
        """
        Check whether two stations are connected.

        Args:
            from_name: First station name
            to_name: Second station name

        Returns:
            True if both stations are served by exactly the same set of
            lines, False otherwise, None if either station is unknown
        """
        pass

    @abstractmethod
    def find_common_lines(self, from_name: str, to_name: str) -> Optional[List[str]]:
        """
        Find lines that serve both stations.

        Args:
            from_name: First station name
            to_name: Second station name

        Returns:
            Sorted line names, or None if either station is unknown
        """
        pass

    @abstractmethod
    def services_at_station(self, name: str) -> Optional[Dict[str, List[TrainService]]]:
        """
        Get the services of every line serving a station.

        Args:
            name: Station name

        Returns:
            Mapping of line name to services, or None if unknown
        """
        pass

    @abstractmethod
    def lines_by_station(self) -> List[Tuple[Station, List[TrainLine]]]:
        """Get every station paired with the lines serving it."""
        pass

    @abstractmethod
    def stations_by_line(self) -> List[Tuple[TrainLine, List[Station]]]:
        """Get every line paired with its stations in travel order."""
        pass
