class FilmResolverError(Exception):
    """Base exception for the film resolver."""


class ConfigurationError(FilmResolverError):
    """Raised when required configuration is missing or invalid."""


class CatalogError(FilmResolverError):
    """Base exception for catalog client failures."""


class CatalogRequestError(CatalogError):
    """Raised when a catalog request fails in transport or with an HTTP error."""

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status


class CatalogResponseError(CatalogError):
    """Raised when a catalog response cannot be parsed."""


class FilmNotFoundError(CatalogError):
    """Raised when the catalog has no film with the requested id."""

    def __init__(self, film_id: int):
        super().__init__(f"Film {film_id} not found")
        self.film_id = film_id
