"""
Unit tests for the Station model.

Tests validation, name-based identity, and the one-way exposure of the
station's line set.
"""

import pytest
from wellington_trains.core.models import Station, TrainLine, CatalogSealedError


class TestStation:
    """Test Station model."""

    def test_station_creation_valid(self):
        """Test creating a Station with valid data."""
        station = Station(name="Petone", zone=3, distance=8.8)

        assert station.name == "Petone"
        assert station.zone == 3
        assert station.distance == 8.8
        assert station.train_lines == frozenset()
        assert station.line_names == []
        assert not station.is_sealed

    def test_station_empty_name_rejected(self):
        """Test that an empty or blank name is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Station(name="", zone=1, distance=0.0)

        with pytest.raises(ValueError, match="cannot be empty"):
            Station(name="   ", zone=1, distance=0.0)

    def test_station_name_with_whitespace_rejected(self):
        """Test that names must be single tokens."""
        with pytest.raises(ValueError, match="whitespace"):
            Station(name="Upper Hutt", zone=8, distance=28.6)

    def test_station_equality_by_name(self):
        """Test that stations compare and hash by name."""
        a = Station(name="Ava", zone=4, distance=11.0)
        b = Station(name="Ava", zone=5, distance=99.0)
        c = Station(name="Epuni", zone=5, distance=14.2)

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_station_not_equal_to_line_with_same_name(self):
        """Test that a station never equals a line."""
        assert Station(name="Melling", zone=4, distance=11.3) != TrainLine("Melling")

    def test_station_str(self):
        """Test string form is the station name."""
        assert str(Station(name="Taita", zone=6, distance=17.4)) == "Taita"

    def test_lines_registered_through_line(self):
        """Test that the station sees lines linked from the line side."""
        station = Station(name="Petone", zone=3, distance=8.8)
        hutt = TrainLine("Wellington_Upper-Hutt")
        melling = TrainLine("Wellington_Melling")

        hutt.add_station(station)
        melling.add_station(station)

        assert station.train_lines == frozenset({hutt, melling})
        assert station.line_names == ["Wellington_Melling", "Wellington_Upper-Hutt"]
        assert station.serves_line("Wellington_Melling")
        assert not station.serves_line("Wellington_Waikanae")

    def test_train_lines_is_a_snapshot(self):
        """Test that the returned line set cannot be used to mutate the station."""
        station = Station(name="Petone", zone=3, distance=8.8)
        lines = station.train_lines

        assert isinstance(lines, frozenset)
        with pytest.raises(AttributeError):
            lines.add(TrainLine("Wellington_Melling"))

    def test_sealed_station_rejects_new_lines(self):
        """Test that a sealed station cannot gain lines."""
        station = Station(name="Petone", zone=3, distance=8.8)
        station._seal()

        with pytest.raises(CatalogSealedError):
            TrainLine("Wellington_Melling").add_station(station)
