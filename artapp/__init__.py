"""
Application package for the Art Gallery service.

Modules separate the API surface, the catalog and favorites services, and
the local settings persistence so that each layer can evolve independently.
"""

from .config import settings  # noqa: F401  (re-export for convenience)
