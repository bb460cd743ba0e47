from .catalog_reader import CatalogReader, CatalogNotFoundError

__all__ = ["CatalogReader", "CatalogNotFoundError"]
