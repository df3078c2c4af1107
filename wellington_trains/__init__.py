"""
Wellington Trains application

A PySide6 desktop application for browsing Wellington regional train
stations, lines and services loaded from flat data files.

Features:
- Station and line listings
- Lines serving a station and stations visited by a line
- Service times by line and by station
- Route check between two stations
- Light/Dark theme switching (defaults to dark)
"""

__version__ = "1.1.0"
__author__ = "Wellington Trains contributors"
__description__ = "Wellington regional train stations, lines and services"
