"""
thangs: command-line interface for Things 3.

Drives the Things 3 desktop app through AppleScript to list, add, edit,
complete and cancel tasks, and to create projects and areas.
"""

__version__ = "0.1.0"

# Import the main CLI app for entry point
from .cli import app

__all__ = ["app", "__version__"]
