"""
Global pytest configuration and fixtures.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from pathlib import Path
from typing import Dict, Optional, Tuple

from wellington_trains.core.services.flat_file_repository import FlatFileRepository
from wellington_trains.core.services.catalog_service import CatalogService
from wellington_trains.managers.config_manager import ConfigData, DataConfig, DisplayConfig, LoggingConfig


SAMPLE_STATIONS = """Alpha 1 0.0
Bravo 1 2.5
Charlie 2 5.0
Delta 3 8.25
Echo 2 4.0
"""

# line name -> (stations file text, services file text)
SAMPLE_LINES: Dict[str, Tuple[str, str]] = {
    "X_Y": ("Charlie\nBravo\nAlpha\n", "0600 0730\n1215\n"),
    "Z_Y": ("Delta\nAlpha\n", "0900\n"),
}


def write_dataset(directory: Path,
                  stations: str = SAMPLE_STATIONS,
                  lines: Optional[Dict[str, Tuple[Optional[str], Optional[str]]]] = None,
                  line_names: Optional[str] = None) -> Path:
    """
    Write a set of .data files into a directory.

    A companion file given as None is not written.
    """
    if lines is None:
        lines = SAMPLE_LINES
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "stations.data").write_text(stations, encoding="utf-8")
    if line_names is None:
        line_names = "".join(f"{name}\n" for name in lines)
    (directory / "train-lines.data").write_text(line_names, encoding="utf-8")

    for name, (stations_text, services_text) in lines.items():
        if stations_text is not None:
            (directory / f"{name}-stations.data").write_text(stations_text, encoding="utf-8")
        if services_text is not None:
            (directory / f"{name}-services.data").write_text(services_text, encoding="utf-8")

    return directory


@pytest.fixture
def make_data_dir(tmp_path):
    """Provide a factory writing custom datasets under tmp_path."""
    def _make(name: str = "custom", **kwargs) -> Path:
        return write_dataset(tmp_path / name, **kwargs)
    return _make


@pytest.fixture
def data_dir(tmp_path):
    """Provide a directory holding the sample dataset."""
    return write_dataset(tmp_path / "data")


@pytest.fixture
def repository(data_dir):
    """Provide a repository over the sample dataset."""
    return FlatFileRepository(str(data_dir))


@pytest.fixture
def catalog(repository):
    """Provide the loaded sample catalog."""
    return repository.load_catalog()


@pytest.fixture
def catalog_service(catalog):
    """Provide a query service over the sample catalog."""
    return CatalogService(catalog)


@pytest.fixture
def test_config(data_dir):
    """Provide a test configuration pointing at the sample dataset."""
    return ConfigData(
        data=DataConfig(data_directory=str(data_dir)),
        display=DisplayConfig(theme="dark", window_width=800, window_height=600),
        logging=LoggingConfig(level="DEBUG"),
    )


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for UI tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
