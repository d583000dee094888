# Common utilities
from .config_loader import (
    CatalogSettings,
    ContactSettings,
    ImageSettings,
    load_config,
    load_settings,
)
from .csv_utils import CsvParseResult, parse_csv, parse_csv_report, split_csv_line, write_csv
from .errors import CatalogError, CatalogLoadError, ProductNotFoundError
from .log_config import setup_logging
