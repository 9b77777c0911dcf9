from .catalog import Catalog, load_catalog_file, parse_catalog
from .config import AppConfig
from .data_io import parse_records
from .schemas import BROWSABLE_TYPES, CatalogQuery, TitleRecord, TitleType

__all__ = [
    "AppConfig",
    "BROWSABLE_TYPES",
    "Catalog",
    "CatalogQuery",
    "TitleRecord",
    "TitleType",
    "load_catalog_file",
    "parse_catalog",
    "parse_records",
]
