"""
DinoPark Fence
GraphQL profile query and update service for the DinoPark directory
"""

__version__ = "0.1.0"

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
