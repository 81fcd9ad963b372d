"""
Task Calendar: projects tasks onto calendar intervals, forecasts recurring
tasks and exports them to iCal.
"""

__version__ = "1.0.0"

# Import the main CLI app for entry point
from .taskcal import app

__all__ = ["app", "__version__"]
