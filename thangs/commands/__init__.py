"""
This __init__.py file makes the 'commands' directory a Python package.

Each module defines a handler for one or more CLI commands. Handlers take
an ``args`` object built by :mod:`thangs.cli`, call the Things 3 layer and
render the outcome, exiting with code 1 on failure.
"""
