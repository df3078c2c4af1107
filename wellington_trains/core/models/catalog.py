"""
Catalog Model

The in-memory collection of all stations, lines and services after load.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .station import Station
from .train_line import TrainLine
from .train_service import TrainService


class Catalog:
    """
    Read-only container for the loaded railway data.

    Building a Catalog seals every station and line it holds, so the
    cross-links cannot change for the rest of the process.
    """

    def __init__(self, stations: Iterable[Station], lines: Iterable[TrainLine]):
        """
        Initialize the catalog and seal its contents.

        Args:
            stations: All stations
            lines: All lines, already linked to their stations

        Raises:
            ValueError: If a station or line name is duplicated
        """
        station_map = {}
        for station in stations:
            if station.name in station_map:
                raise ValueError(f"Duplicate station name: {station.name}")
            station_map[station.name] = station

        line_map = {}
        for line in lines:
            if line.name in line_map:
                raise ValueError(f"Duplicate line name: {line.name}")
            line_map[line.name] = line

        for station in station_map.values():
            station._seal()
        for line in line_map.values():
            line._seal()

        self._stations: Mapping[str, Station] = MappingProxyType(station_map)
        self._lines: Mapping[str, TrainLine] = MappingProxyType(line_map)

    @property
    def stations(self) -> Mapping[str, Station]:
        return self._stations

    @property
    def lines(self) -> Mapping[str, TrainLine]:
        return self._lines

    @property
    def services(self) -> List[TrainService]:
        """Get every service across all lines."""
        return [service for line in self._lines.values() for service in line.services]

    def get_station(self, name: str) -> Optional[Station]:
        return self._stations.get(name)

    def get_line(self, name: str) -> Optional[TrainLine]:
        return self._lines.get(name)

    def __len__(self) -> int:
        return len(self._stations)

    def __repr__(self) -> str:
        return (f"Catalog(stations={len(self._stations)}, lines={len(self._lines)}, "
                f"services={len(self.services)})")
