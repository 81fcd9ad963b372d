"""
This __init__.py file makes the 'commands' directory a Python package.

Each module defines a handler for one CLI command. Handlers take an
argument object (attribute access) so they can be called from the Typer
app or directly from scripts.
"""
