"""Exception types raised by the catalog pipeline and the favorites store."""


class CatalogError(Exception):
    """Base class for failures that abort a whole catalog search."""


class InvalidInputError(CatalogError):
    """The query could not be encoded into a request URL."""


class NetworkError(CatalogError):
    """Transport failure or non-success status on the search call."""


class DecodeError(CatalogError):
    """The search response body did not match the expected shape."""


class FavoritesNotLoadedError(RuntimeError):
    """The favorites store was used before `load()` was called."""
