"""
Background workers for the user interface.
"""
