"""
Flat File Repository Implementation

Repository implementation for loading the Wellington catalog from the
whitespace-delimited ``.data`` files.
"""

import logging
import math
import re
from pathlib import Path
from typing import Dict, List, Optional

from ..interfaces.i_catalog_repository import ICatalogRepository
from ..models.catalog import Catalog
from ..models.station import Station
from ..models.train_line import TrainLine
from ..models.train_service import is_valid_time

STATIONS_FILE = "stations.data"
TRAIN_LINES_FILE = "train-lines.data"
LINE_STATIONS_SUFFIX = "-stations.data"
LINE_SERVICES_SUFFIX = "-services.data"

INTEGER_PATTERN = re.compile(r"[0-9]+")
DECIMAL_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


class CatalogLoadError(Exception):
    """Exception raised when the catalog cannot be fully loaded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class FlatFileRepository(ICatalogRepository):
    """Repository implementation for flat ``.data`` files."""

    def __init__(self, data_directory: Optional[str] = None):
        """
        Initialize the flat file repository.

        Args:
            data_directory: Directory holding the data files. Defaults to the
                bundled data directory.

        Raises:
            CatalogLoadError: If no data directory is given and the bundled
                one cannot be found
        """
        if data_directory is None:
            from ...utils.data_path_resolver import get_data_directory
            try:
                self._data_directory = get_data_directory()
            except FileNotFoundError as e:
                raise CatalogLoadError(str(e)) from e
        else:
            self._data_directory = Path(data_directory)

        self.logger = logging.getLogger(__name__)
        self.logger.info(f"Initialized FlatFileRepository with data directory: {self._data_directory}")

    @property
    def data_directory(self) -> Path:
        return self._data_directory

    def load_catalog(self) -> Catalog:
        """Load stations, lines and services into a sealed Catalog."""
        self.logger.info("Loading railway data from flat files...")

        stations = self.load_stations()
        station_map = {station.name: station for station in stations}

        lines = []
        for line_name in self.load_line_names():
            line = TrainLine(line_name)
            self._load_line_stations(line, station_map)
            self._load_line_services(line)
            lines.append(line)

        catalog = Catalog(stations, lines)
        self.logger.info(f"Loaded {len(stations)} stations, {len(lines)} train lines "
                         f"and {len(catalog.services)} services")
        return catalog

    def load_stations(self) -> List[Station]:
        """Parse ``stations.data`` as a stream of name/zone/distance triples."""
        path = self._data_directory / STATIONS_FILE
        tokens = self._read_text(path).split()

        if len(tokens) % 3 != 0:
            raise CatalogLoadError(
                f"Malformed station data in {path.name}: {len(tokens)} tokens "
                "is not a whole number of name/zone/distance records", path)

        stations = []
        seen = set()
        for i in range(0, len(tokens), 3):
            name, zone_token, distance_token = tokens[i:i + 3]
            record = i // 3 + 1
            if not INTEGER_PATTERN.fullmatch(zone_token):
                raise CatalogLoadError(
                    f"Malformed station record {record} in {path.name}: "
                    f"zone {zone_token!r} is not an integer", path)
            if not DECIMAL_PATTERN.fullmatch(distance_token):
                raise CatalogLoadError(
                    f"Malformed station record {record} in {path.name}: "
                    f"distance {distance_token!r} is not a number", path)
            zone = int(zone_token)
            distance = float(distance_token)
            if not math.isfinite(distance):
                raise CatalogLoadError(
                    f"Malformed station record {record} in {path.name}: "
                    f"distance {distance_token!r} is out of range", path)

            if name in seen:
                raise CatalogLoadError(f"Duplicate station {name} in {path.name}", path)
            seen.add(name)
            stations.append(Station(name=name, zone=zone, distance=distance))

        self.logger.debug(f"{path.name} loaded: {len(stations)} stations")
        return stations

    def load_line_names(self) -> List[str]:
        """Parse ``train-lines.data``, one line name per line."""
        path = self._data_directory / TRAIN_LINES_FILE
        names = self._read_lines(path)

        for name in names:
            if "/" in name or "\\" in name or name in (".", ".."):
                raise CatalogLoadError(
                    f"Invalid train line name {name!r} in {path.name}", path)

        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise CatalogLoadError(
                f"Duplicate train line(s) in {path.name}: {', '.join(duplicates)}", path)

        self.logger.debug(f"{path.name} loaded: {len(names)} train lines")
        return names

    def _load_line_stations(self, line: TrainLine, station_map: Dict[str, Station]) -> None:
        """Link the stations listed in ``<line>-stations.data`` to the line."""
        path = self._data_directory / f"{line.name}{LINE_STATIONS_SUFFIX}"

        for station_name in self._read_lines(path):
            station = station_map.get(station_name)
            if station is None:
                raise CatalogLoadError(
                    f"Unknown station {station_name} in {path.name}", path)
            line.add_station(station)

        self.logger.debug(f"{path.name} loaded: {line.station_count} stations")

    def _load_line_services(self, line: TrainLine) -> None:
        """Create one single-time service per token in ``<line>-services.data``."""
        path = self._data_directory / f"{line.name}{LINE_SERVICES_SUFFIX}"

        for token in self._read_text(path).split():
            if not INTEGER_PATTERN.fullmatch(token) or not is_valid_time(int(token)):
                raise CatalogLoadError(
                    f"Malformed service time {token!r} in {path.name}", path)
            line.add_service([int(token)])

        self.logger.debug(f"{path.name} loaded: {len(line.services)} services")

    def _read_lines(self, path: Path) -> List[str]:
        """Read non-blank, stripped lines from a file."""
        return [line.strip() for line in self._read_text(path).splitlines() if line.strip()]

    def _read_text(self, path: Path) -> str:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise CatalogLoadError(f"Data file not found: {path}", path) from None
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"Failed to read {path}: {e}", path) from e
