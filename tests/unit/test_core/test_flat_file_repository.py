"""
Unit tests for FlatFileRepository.

Tests catalog loading with real files written to a temporary directory,
including the fail-fast behaviour for missing and malformed data.
"""

import pytest
from pathlib import Path

from wellington_trains.core.models import Catalog
from wellington_trains.core.services.flat_file_repository import (
    CatalogLoadError,
    FlatFileRepository,
)


class TestLoadCatalog:
    """Test loading a well-formed dataset."""

    def test_counts(self, catalog):
        """Test that every station, line and service is loaded."""
        assert isinstance(catalog, Catalog)
        assert len(catalog.stations) == 5
        assert len(catalog.lines) == 2
        assert len(catalog.services) == 4

    def test_station_records(self, catalog):
        delta = catalog.get_station("Delta")

        assert delta.zone == 3
        assert delta.distance == 8.25

    def test_bidirectional_links(self, catalog, data_dir):
        """Test every declared link is visible from both sides."""
        for line_name in ("X_Y", "Z_Y"):
            declared = (data_dir / f"{line_name}-stations.data").read_text().split()
            line = catalog.get_line(line_name)
            for station_name in declared:
                station = catalog.get_station(station_name)
                assert line in station.train_lines
                assert station in line.stations

    def test_station_order_follows_file(self, catalog):
        assert [s.name for s in catalog.get_line("X_Y").stations] == ["Charlie", "Bravo", "Alpha"]

    def test_one_service_per_time_token(self, catalog):
        """Test that each time token creates its own single-time service."""
        services = catalog.get_line("X_Y").services

        assert [s.times for s in services] == [(600,), (730,), (1215,)]
        assert all(s.line_name == "X_Y" for s in services)

    def test_catalog_is_sealed(self, catalog):
        assert all(s.is_sealed for s in catalog.stations.values())
        assert all(line.is_sealed for line in catalog.lines.values())

    def test_station_without_lines(self, catalog):
        assert catalog.get_station("Echo").train_lines == frozenset()

    def test_records_spanning_lines(self, make_data_dir):
        """Test that station records are a token stream, not one per line."""
        directory = make_data_dir(
            stations="Alpha 1\n0.0 Bravo\n1 2.5   Charlie 2 5\n",
            lines={"A_C": ("Alpha\nCharlie\n", "")},
        )

        catalog = FlatFileRepository(str(directory)).load_catalog()

        assert sorted(catalog.stations) == ["Alpha", "Bravo", "Charlie"]
        assert catalog.get_station("Charlie").distance == 5.0
        assert catalog.get_line("A_C").services == []

    def test_blank_lines_and_padding_ignored(self, make_data_dir):
        directory = make_data_dir(
            stations="Alpha 1 0.0\nBravo 1 2.5\n",
            lines={"A_B": ("\n  Alpha  \n\nBravo\n\n", "\n 0600 \n")},
            line_names="\n A_B \n\n",
        )

        catalog = FlatFileRepository(str(directory)).load_catalog()

        assert list(catalog.lines) == ["A_B"]
        assert [s.name for s in catalog.get_line("A_B").stations] == ["Alpha", "Bravo"]

    def test_empty_dataset(self, make_data_dir):
        directory = make_data_dir(stations="", lines={})

        catalog = FlatFileRepository(str(directory)).load_catalog()

        assert len(catalog.stations) == 0
        assert len(catalog.lines) == 0


class TestLoadFailures:
    """Test that every load fault raises CatalogLoadError."""

    def test_missing_stations_file(self, tmp_path):
        with pytest.raises(CatalogLoadError, match="not found") as exc_info:
            FlatFileRepository(str(tmp_path)).load_catalog()

        assert exc_info.value.path == tmp_path / "stations.data"

    def test_missing_train_lines_file(self, data_dir):
        (data_dir / "train-lines.data").unlink()

        with pytest.raises(CatalogLoadError, match="train-lines.data"):
            FlatFileRepository(str(data_dir)).load_catalog()

    def test_missing_companion_stations_file(self, make_data_dir):
        directory = make_data_dir(lines={"X_Y": (None, "0600\n")})

        with pytest.raises(CatalogLoadError, match="X_Y-stations.data"):
            FlatFileRepository(str(directory)).load_catalog()

    def test_missing_companion_services_file(self, make_data_dir):
        directory = make_data_dir(lines={"X_Y": ("Alpha\nBravo\n", None)})

        with pytest.raises(CatalogLoadError, match="X_Y-services.data"):
            FlatFileRepository(str(directory)).load_catalog()

    def test_unknown_station_in_line(self, make_data_dir):
        directory = make_data_dir(lines={"X_Y": ("Alpha\nZulu\n", "0600\n")})

        with pytest.raises(CatalogLoadError, match="Unknown station Zulu in X_Y-stations.data"):
            FlatFileRepository(str(directory)).load_catalog()

    def test_incomplete_station_record(self, make_data_dir):
        directory = make_data_dir(stations="Alpha 1 0.0\nBravo 1\n")

        with pytest.raises(CatalogLoadError, match="not a whole number"):
            FlatFileRepository(str(directory)).load_catalog()

    @pytest.mark.parametrize("stations,message", [
        ("Alpha one 0.0\n", "zone 'one' is not an integer"),
        ("Alpha 1.5 0.0\n", "zone '1.5' is not an integer"),
        ("Alpha 1 far\n", "distance 'far' is not a number"),
        ("Alpha 1_0 0.0\n", "zone '1_0' is not an integer"),
        ("Alpha -1 0.0\n", "zone '-1' is not an integer"),
        ("Alpha 1 nan\n", "distance 'nan' is not a number"),
        ("Alpha 1 inf\n", "distance 'inf' is not a number"),
        ("Alpha 1 1_0.5\n", "distance '1_0.5' is not a number"),
        ("Alpha 1 " + "9" * 400 + "\n", "is out of range"),
    ])
    def test_malformed_station_values(self, make_data_dir, stations, message):
        directory = make_data_dir(stations=stations, lines={})

        with pytest.raises(CatalogLoadError, match=message):
            FlatFileRepository(str(directory)).load_catalog()

    def test_duplicate_station(self, make_data_dir):
        directory = make_data_dir(stations="Alpha 1 0.0\nAlpha 2 1.0\n", lines={})

        with pytest.raises(CatalogLoadError, match="Duplicate station Alpha"):
            FlatFileRepository(str(directory)).load_catalog()

    def test_duplicate_line(self, make_data_dir):
        directory = make_data_dir(line_names="X_Y\nZ_Y\nX_Y\n")

        with pytest.raises(CatalogLoadError, match="Duplicate train line"):
            FlatFileRepository(str(directory)).load_catalog()

    @pytest.mark.parametrize("services", [
        "0600 seven\n", "06:00\n", "-100\n", "9999\n", "2575\n", "2400\n", "0760\n", "1_000\n",
    ])
    def test_malformed_service_time(self, make_data_dir, services):
        directory = make_data_dir(lines={"X_Y": ("Alpha\n", services)})

        with pytest.raises(CatalogLoadError, match="Malformed service time"):
            FlatFileRepository(str(directory)).load_catalog()

    def test_latest_service_time(self, make_data_dir):
        directory = make_data_dir(lines={"X_Y": ("Alpha\n", "0000 2359\n")})

        line = FlatFileRepository(str(directory)).load_catalog().get_line("X_Y")

        assert [str(service) for service in line.services] == ["00:00", "23:59"]

    @pytest.mark.parametrize("line_name", ["../outside", "nested/X_Y", "..\\outside", ".."])
    def test_line_name_with_path_separator(self, make_data_dir, line_name):
        directory = make_data_dir(line_names=f"X_Y\n{line_name}\n")

        with pytest.raises(CatalogLoadError, match="Invalid train line name"):
            FlatFileRepository(str(directory)).load_catalog()

    def test_undecodable_file(self, data_dir):
        (data_dir / "stations.data").write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(CatalogLoadError, match="Failed to read"):
            FlatFileRepository(str(data_dir)).load_catalog()


class TestPartialLoaders:
    """Test the single-file loaders."""

    def test_load_stations(self, repository):
        stations = repository.load_stations()

        assert [s.name for s in stations] == ["Alpha", "Bravo", "Charlie", "Delta", "Echo"]
        assert all(s.train_lines == frozenset() for s in stations)

    def test_load_line_names(self, repository):
        assert repository.load_line_names() == ["X_Y", "Z_Y"]

    def test_data_directory(self, repository, data_dir):
        assert repository.data_directory == Path(data_dir)

    def test_default_data_directory_is_bundled(self):
        repository = FlatFileRepository()

        assert (repository.data_directory / "stations.data").exists()
