"""
Text formatters for catalog query results.
"""
