"""
Configuration Loader

Loads config/catalog.yaml into CatalogSettings and applies environment
overrides (CATALOG_* variables, typically coming from a .env file).
"""

import logging
import os
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .constants import (
    CONTACT_FIELDS,
    DEFAULT_CONTACT_MESSAGE,
    DEFAULT_IMAGE_EXTENSIONS,
    FIRST_ADDITIONAL_INDEX,
    MAX_ADDITIONAL_IMAGES,
    PLACEHOLDER_IMAGE,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'catalog.yaml'
STRATEGIES = ('manifest', 'probe')

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    'CATALOG_CSV_SOURCE': (None, 'csv_source'),
    'CATALOG_STORE_NAME': (None, 'store_name'),
    'CATALOG_IMAGE_BASE': ('images', 'base_path'),
    'CATALOG_IMAGE_STRATEGY': ('images', 'strategy'),
    'CATALOG_IMAGE_MANIFEST': ('images', 'manifest'),
    'CATALOG_WHATSAPP_NUMBER': ('contact', 'whatsapp_number'),
}


@dataclass
class ImageSettings:
    """How product galleries are resolved."""
    strategy: str = 'manifest'
    base_path: str = 'images/'
    manifest: Optional[str] = 'images/images.json'
    extensions: Tuple[str, ...] = DEFAULT_IMAGE_EXTENSIONS
    placeholder: str = PLACEHOLDER_IMAGE
    first_additional_index: int = FIRST_ADDITIONAL_INDEX
    max_additional: int = MAX_ADDITIONAL_IMAGES
    probe_timeout: Optional[float] = None
    max_workers: int = 5

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown image strategy: {self.strategy!r}. Supported: {', '.join(STRATEGIES)}"
            )
        if self.strategy == 'manifest' and not self.manifest:
            raise ValueError("The manifest strategy needs images.manifest to be set")
        if not self.extensions:
            raise ValueError("At least one image extension is required")
        self.extensions = tuple(ext.lstrip('.').lower() for ext in self.extensions)
        if self.base_path and not self.base_path.endswith('/'):
            self.base_path += '/'


@dataclass
class ContactSettings:
    """Outbound contact link settings."""
    whatsapp_number: str = ''
    message: str = DEFAULT_CONTACT_MESSAGE

    def __post_init__(self):
        # Only {name}, {brand} and {price} can be filled in
        for _literal, name, _spec, _conversion in string.Formatter().parse(self.message):
            if name is not None and name not in CONTACT_FIELDS:
                raise ValueError(
                    f"Unknown placeholder {{{name}}} in contact.message. "
                    f"Supported: {', '.join('{' + f + '}' for f in CONTACT_FIELDS)}"
                )


@dataclass
class CatalogSettings:
    """Top-level catalog configuration."""
    store_name: str = 'Catálogo'
    csv_source: str = 'products.csv'
    images: ImageSettings = field(default_factory=ImageSettings)
    contact: ContactSettings = field(default_factory=ContactSettings)


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to the package first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str = CONFIG_FILENAME) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'catalog.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def apply_env_overrides(raw: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Overlay CATALOG_* environment variables on a raw config dict.

    Args:
        raw: Parsed config (modified in place)
        environ: Environment mapping (default: os.environ)

    Returns:
        The updated config dict
    """
    environ = os.environ if environ is None else environ

    for var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(var)
        if not value:
            continue
        target = raw if section is None else raw.setdefault(section, {})
        target[key] = value
        logger.debug("Config override from %s", var)

    return raw


def settings_from_dict(raw: Dict[str, Any]) -> CatalogSettings:
    """
    Build CatalogSettings from a raw config dict.

    Unknown keys are ignored; missing keys keep their defaults.
    """
    images_raw = dict(raw.get('images') or {})
    if 'extensions' in images_raw:
        images_raw['extensions'] = tuple(images_raw['extensions'])
    images = ImageSettings(**{
        k: v for k, v in images_raw.items() if k in ImageSettings.__dataclass_fields__
    })

    contact_raw = raw.get('contact') or {}
    contact = ContactSettings(**{
        k: str(v) for k, v in contact_raw.items() if k in ContactSettings.__dataclass_fields__
    })

    return CatalogSettings(
        store_name=raw.get('store_name', CatalogSettings.store_name),
        csv_source=raw.get('csv_source', CatalogSettings.csv_source),
        images=images,
        contact=contact,
    )


def load_settings(
    config_file: Optional[str | Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> CatalogSettings:
    """
    Load catalog settings.

    Args:
        config_file: Explicit YAML path (default: config/catalog.yaml)
        environ: Environment mapping for overrides (default: os.environ)

    Returns:
        CatalogSettings with environment overrides applied
    """
    if config_file is None:
        raw = load_config(CONFIG_FILENAME)
    else:
        with open(config_file, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}

    return settings_from_dict(apply_env_overrides(raw, environ))
