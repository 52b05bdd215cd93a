from .base import CatalogOperations, RemoteService
from .http import SwapiHttpClient

__all__ = ["CatalogOperations", "RemoteService", "SwapiHttpClient"]
