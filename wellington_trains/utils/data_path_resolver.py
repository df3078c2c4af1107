"""
Data path resolver for finding the bundled data files in both development
and packaged environments.
"""
import sys
from pathlib import Path


def get_data_directory() -> Path:
    """
    Get the data directory path that works in both development and packaged environments.

    Returns:
        Path to the data directory

    Raises:
        FileNotFoundError: If no data directory can be found
    """
    # Packaged executable: data sits next to the executable
    if getattr(sys, 'frozen', False):
        exe_dir = Path(sys.executable).parent
        for candidate in (exe_dir / "data", exe_dir / "wellington_trains" / "data"):
            if candidate.exists():
                return candidate

    # Development or installed package: this file is in wellington_trains/utils/
    package_data_dir = Path(__file__).parent.parent / "data"
    if package_data_dir.exists():
        return package_data_dir

    cwd_data_dir = Path.cwd() / "wellington_trains" / "data"
    if cwd_data_dir.exists():
        return cwd_data_dir

    raise FileNotFoundError(
        "Could not find data directory. Searched in:\n" +
        f"- Executable directory: {Path(sys.executable).parent if getattr(sys, 'frozen', False) else 'N/A'}\n" +
        f"- Package path: {package_data_dir}\n" +
        f"- Current directory: {Path.cwd()}\n" +
        "Please ensure the data directory exists in the expected location."
    )


def get_data_file_path(filename: str) -> Path:
    """
    Get the full path to a data file.

    Args:
        filename: Name of the file (e.g., 'stations.data')

    Returns:
        Full path to the file
    """
    return get_data_directory() / filename
