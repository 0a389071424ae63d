"""
Shared helpers for the thangs CLI: configuration, logging and output.
"""
