"""
Train Line Model

Data model for a train line: an ordered list of stations plus the
services that run on it.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .station import CatalogSealedError, Station
from .train_service import TrainService


@dataclass(eq=False)
class TrainLine:
    """
    A named line visiting stations in travel order.

    Line names conventionally follow ``Origin_Destination``. Lines compare
    and hash by name.
    """

    name: str
    _stations: List[Station] = field(default_factory=list, init=False, repr=False)
    _services: List[TrainService] = field(default_factory=list, init=False, repr=False)
    _sealed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        """Validate train line data."""
        if not self.name or not self.name.strip():
            raise ValueError("Line name cannot be empty")

    def __eq__(self, other) -> bool:
        if not isinstance(other, TrainLine):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("line", self.name))

    def __str__(self) -> str:
        return self.name

    def add_station(self, station: Station) -> None:
        """
        Link a station to this line.

        This is the only place the station/line association is created:
        the station is appended to the line's travel order and the line is
        registered on the station.

        Args:
            station: Station visited next on this line

        Raises:
            CatalogSealedError: If either side has been sealed
        """
        if self._sealed or station.is_sealed:
            raise CatalogSealedError(f"Cannot link {station.name} to sealed line {self.name}")

        station._register_line(self)
        self._stations.append(station)

    def add_service(self, times: Iterable[int]) -> TrainService:
        """
        Create a service on this line.

        Args:
            times: Departure times (HHMM) for the service

        Returns:
            The new TrainService
        """
        if self._sealed:
            raise CatalogSealedError(f"Line {self.name} is sealed")

        service = TrainService(line_name=self.name, times=tuple(times))
        self._services.append(service)
        return service

    @property
    def stations(self) -> List[Station]:
        """Get the stations on this line in travel order."""
        return list(self._stations)

    @property
    def services(self) -> List[TrainService]:
        """Get the services on this line in file order."""
        return list(self._services)

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def origin(self) -> Optional[str]:
        """Get the origin part of an ``Origin_Destination`` line name."""
        if "_" not in self.name:
            return None
        return self.name.split("_", 1)[0]

    @property
    def destination(self) -> Optional[str]:
        """Get the destination part of an ``Origin_Destination`` line name."""
        if "_" not in self.name:
            return None
        return self.name.split("_", 1)[1]

    @property
    def terminus_stations(self) -> List[Station]:
        """Get the terminus stations (first and last)."""
        if len(self._stations) >= 2:
            return [self._stations[0], self._stations[-1]]
        return list(self._stations)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def visits(self, station_name: str) -> bool:
        """Check if this line visits the named station."""
        return any(s.name == station_name for s in self._stations)

    def _seal(self) -> None:
        self._sealed = True
