"""
Managers Package

Application configuration and theme management.
"""
