"""
Shared helpers: logging and constants.
"""
