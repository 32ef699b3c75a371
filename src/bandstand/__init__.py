"""
Bandstand
GraphQL-over-HTTP demo server with a static player roster
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
