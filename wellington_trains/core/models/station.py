"""
Station Model

Data model for a Wellington regional train station.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .train_line import TrainLine


class CatalogSealedError(RuntimeError):
    """Raised when a model is modified after the catalog has been loaded."""

    pass


@dataclass(eq=False)
class Station:
    """
    A named station with its fare zone and distance value.

    The set of lines serving the station is maintained by
    ``TrainLine.add_station``; it cannot be changed from the station side.
    Stations compare and hash by name.
    """

    name: str
    zone: int
    distance: float
    _train_lines: Dict[str, "TrainLine"] = field(default_factory=dict, init=False, repr=False)
    _sealed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Station name cannot be empty")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(f"Station name cannot contain whitespace: {self.name!r}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("station", self.name))

    def __str__(self) -> str:
        return self.name

    @property
    def train_lines(self) -> FrozenSet["TrainLine"]:
        """Get the lines serving this station."""
        return frozenset(self._train_lines.values())

    @property
    def line_names(self) -> List[str]:
        """Get the names of the lines serving this station, sorted."""
        return sorted(self._train_lines)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def serves_line(self, line_name: str) -> bool:
        """Check if a line with the given name serves this station."""
        return line_name in self._train_lines

    def _register_line(self, line: "TrainLine") -> None:
        # Only called from TrainLine.add_station.
        if self._sealed:
            raise CatalogSealedError(f"Station {self.name} is sealed")
        self._train_lines.setdefault(line.name, line)

    def _seal(self) -> None:
        self._sealed = True
