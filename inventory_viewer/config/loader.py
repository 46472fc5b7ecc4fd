from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from inventory_viewer.config.model import DEFAULT_FILTERS, FilterFieldConfig, GlobalConfig, SourceConfig
from inventory_viewer.core.exceptions import ConfigError
from inventory_viewer.core.query import DEFAULT_SEARCH_FIELDS
from inventory_viewer.validation.errors import ValidationError
from inventory_viewer.validation.profile_validation import validate_profile

logger = logging.getLogger(__name__)

SOURCE_URL_ENV = "INVENTORY_VIEWER_SOURCE_URL"


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config root directory.

    Expected structure:

        root/
            global.json

    global.json keys:

    - ui_title / subtitle: navbar text
    - source: {"url", "timeout_seconds", "retries"}; the url can be overridden
              with the INVENTORY_VIEWER_SOURCE_URL env var
    - search_fields: columns matched by the free-text search
    - filters: [{"field", "label", "placeholder"}] dropdown filters, in display order

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if the file is missing, unreadable, or describes an invalid profile.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    cfg = _parse_global(raw_global, url_override=os.environ.get(SOURCE_URL_ENV))

    if not cfg.source.url:
        raise ConfigError(f"No source url configured (set source.url in {global_path} or {SOURCE_URL_ENV})")

    try:
        validate_profile(cfg.profile)
    except ValidationError as e:
        logger.error("Invalid query profile in config", extra={"issues": e.codes})
        raise ConfigError(str(e)) from e

    logger.info(
        "Global config loaded",
        extra={
            "source_url": cfg.source.url,
            "search_fields": cfg.search_fields,
            "filter_fields": [f.field for f in cfg.filters],
        },
    )
    return cfg


def _parse_global(raw: Dict[str, Any], url_override: str | None = None) -> GlobalConfig:
    raw_source = raw.get("source") or {}
    if not isinstance(raw_source, dict):
        raise ConfigError(f"Malformed config entry: 'source' must be an object, got {type(raw_source).__name__}")

    raw_filters = raw.get("filters")
    if raw_filters is not None and not isinstance(raw_filters, list):
        raise ConfigError(f"Malformed config entry: 'filters' must be a list, got {type(raw_filters).__name__}")

    for idx, entry in enumerate(raw_filters or []):
        if not isinstance(entry, dict) or not isinstance(entry.get("field"), str):
            raise ConfigError(f"Malformed config entry: filters[{idx}] needs a string 'field', got {entry!r}")

    try:
        if raw_filters is None:
            filters: List[FilterFieldConfig] = list(DEFAULT_FILTERS)
        else:
            filters = [FilterFieldConfig.from_raw(entry) for entry in raw_filters]

        source = SourceConfig.from_raw(raw_source, url_override=url_override)
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Malformed config entry: {e!r}") from e

    return GlobalConfig(
        source=source,
        ui_title=raw.get("ui_title", "Inventory Viewer"),
        subtitle=raw.get("subtitle", "Product stock & sales overview"),
        search_fields=list(raw.get("search_fields") or DEFAULT_SEARCH_FIELDS),
        filters=filters,
    )
