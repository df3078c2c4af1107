"""
Catalog Formatter

Renders catalog query results as plain text for the output pane.
"""

import logging
from typing import Iterable, List

from ...core.models.station import Station
from ...core.models.train_line import TrainLine
from ...core.models.train_service import TrainService
from ...core.services.catalog_service import CatalogService

NO_ROUTE_MESSAGE = "Unable to travel between selected stations without a train connection!"
NO_LINES_MESSAGE = "{from_name} and {to_name} are not served by any train line"


def format_station(station: Station) -> str:
    """Format a station as ``Name (zone Z, D km)``."""
    return f"{station.name} (zone {station.zone}, {station.distance:.1f} km)"


def format_line(line: TrainLine) -> str:
    """Format a line with its termini and counts."""
    if line.origin and line.destination:
        route = f"{line.origin} → {line.destination}"
    else:
        route = line.name
    return (f"{line.name}: {route}, {line.station_count} stations, "
            f"{len(line.services)} services")


def format_name_list(items: Iterable) -> str:
    """Format stations or lines as a bracketed, comma separated list of names."""
    return "[" + ", ".join(item.name for item in items) + "]"


def format_services(services: List[TrainService]) -> str:
    if not services:
        return "(no services)"
    return ", ".join(str(service) for service in services)


class CatalogFormatter:
    """Formats catalog queries for the UI text pane."""

    def __init__(self, catalog_service: CatalogService):
        """
        Initialize the catalog formatter.

        Args:
            catalog_service: Query service over the loaded catalog
        """
        self.catalog_service = catalog_service
        self.logger = logging.getLogger(__name__)

    def all_stations(self) -> str:
        """Alphabetical list of all stations."""
        return "\n".join(format_station(s) for s in self.catalog_service.list_stations())

    def all_lines(self) -> str:
        """Alphabetical list of all train lines, separated by blank lines."""
        return "\n\n".join(format_line(line) for line in self.catalog_service.list_lines())

    def lines_by_station(self) -> str:
        """Every station followed by the lines serving it."""
        blocks = [
            f"{format_station(station)}\n{format_name_list(lines)}"
            for station, lines in self.catalog_service.lines_by_station()
        ]
        return "\n\n".join(blocks)

    def stations_by_line(self) -> str:
        """Every line followed by the stations it visits."""
        blocks = [
            f"{line.name}\n{format_name_list(stations)}"
            for line, stations in self.catalog_service.stations_by_line()
        ]
        return "\n\n".join(blocks)

    def lines_at_station(self, station_name: str) -> str:
        lines = self.catalog_service.lines_at_station(station_name)
        if lines is None:
            return f"Unknown station: {station_name}"

        station = self.catalog_service.get_station(station_name)
        return f"{format_station(station)}\n{format_name_list(sorted(lines, key=lambda l: l.name))}"

    def stations_on_line(self, line_name: str) -> str:
        stations = self.catalog_service.stations_on_line(line_name)
        if stations is None:
            return f"Unknown train line: {line_name}"
        return f"{line_name}\n{format_name_list(stations)}"

    def services_on_line(self, line_name: str) -> str:
        services = self.catalog_service.services_on_line(line_name)
        if services is None:
            return f"Unknown train line: {line_name}"
        return f"{line_name}\n{format_services(services)}"

    def services_at_station(self, station_name: str) -> str:
        """Service times for every line serving a station."""
        by_line = self.catalog_service.services_at_station(station_name)
        if by_line is None:
            return f"Unknown station: {station_name}"

        output = [f"{station_name} has the following train lines and service times:"]
        for line_name, services in by_line.items():
            output.append(f"{line_name}: {format_services(services)}")
        return "\n".join(output)

    def route(self, from_name: str, to_name: str) -> str:
        """
        Route report between two stations.

        Lists the stations visited by each line when the two stations are
        served by the same lines, otherwise a no-connection message. Stations
        that no line serves have equal (empty) line sets, so they get a
        no-lines message instead.
        """
        exists = self.catalog_service.route_exists(from_name, to_name)
        self.logger.debug(f"Route {from_name} -> {to_name}: {exists}")
        if exists is None:
            unknown = [n for n in (from_name, to_name) if self.catalog_service.get_station(n) is None]
            return "\n".join(f"Unknown station: {name}" for name in unknown)

        if not exists:
            return NO_ROUTE_MESSAGE

        lines = self.catalog_service.route_lines(from_name, to_name)
        if not lines:
            return NO_LINES_MESSAGE.format(from_name=from_name, to_name=to_name)

        return "\n".join(
            f"Stations visited by {line.name} : {format_name_list(line.stations)}"
            for line in lines
        )

    def load_summary(self) -> str:
        stats = self.catalog_service.get_catalog_statistics()
        return (
            "Train Stations data successfully loaded!\n"
            f"Train Lines data successfully loaded! ({stats['train_lines']} lines, "
            f"{stats['stations']} stations, {stats['services']} services)"
        )
