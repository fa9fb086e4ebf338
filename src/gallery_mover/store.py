"""Mapping file loading and the atomically swapped configuration snapshot."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import yaml
from loguru import logger

from .errors import ConfigError

log = logger.bind(component="config")

DELIVERY_CAR_KEY = "delivery_car"
MAPPINGS_KEY = "mappings"


def normalize_alias(alias: str) -> str:
    """Lookup key for an alias: surrounding whitespace dropped, casefolded."""
    return alias.strip().casefold()


@dataclass(frozen=True)
class DeliveryConfig:
    """One complete, immutable view of the mapping file."""

    inbox: Path
    mappings: Mapping[str, Path]
    source: Path

    def resolve(self, alias: str) -> Path | None:
        return self.mappings.get(normalize_alias(alias))


def _as_path(value: object, what: str, source: Path) -> Path:
    if value is None or isinstance(value, (dict, list)):
        raise ConfigError(f"{what} must be a path string in {source}", source)
    text = str(value).strip()
    if not text:
        raise ConfigError(f"{what} is empty in {source}", source)
    return Path(text).expanduser()


def parse_config(data: object, source: Path) -> DeliveryConfig:
    """Validate parsed YAML and build a DeliveryConfig.

    `delivery_car` is required; `mappings` may be missing or null (empty map).
    Keys that collide after casefolding keep the later value.
    """
    if data is None:
        raise ConfigError(f"Mapping file is empty: {source}", source)
    if not isinstance(data, dict):
        raise ConfigError(
            f"Mapping file must contain a mapping at top level: {source}", source
        )

    if DELIVERY_CAR_KEY not in data:
        raise ConfigError(f"'{DELIVERY_CAR_KEY}' is not defined in {source}", source)
    inbox = _as_path(data[DELIVERY_CAR_KEY], f"'{DELIVERY_CAR_KEY}'", source)

    raw_mappings = data.get(MAPPINGS_KEY)
    if raw_mappings is None:
        raw_mappings = {}
    if not isinstance(raw_mappings, dict):
        raise ConfigError(f"'{MAPPINGS_KEY}' must be a mapping in {source}", source)

    mappings: dict[str, Path] = {}
    for key, value in raw_mappings.items():
        alias = normalize_alias(str(key)) if key is not None else ""
        if not alias:
            log.warning(f"Skipping empty alias in {source}")
            continue
        if alias in mappings:
            log.warning(f"Alias [{key}] defined more than once in {source}, last one wins")
        mappings[alias] = _as_path(value, f"Destination for alias [{key}]", source)

    return DeliveryConfig(
        inbox=inbox,
        mappings=MappingProxyType(mappings),
        source=source,
    )


def read_config_file(source: Path) -> DeliveryConfig:
    """Read and parse a YAML mapping file. Raises ConfigError on any failure."""
    log.debug(f"read_config_file(source={source})")

    if not source.is_file():
        raise ConfigError(f"Configuration file not found: {source.absolute()}", source)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {source}: {e}", source) from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML file {source}: {e}", source) from e

    return parse_config(data, source)


class ConfigStore:
    """Owner of the current DeliveryConfig snapshot.

    Loads are serialized by a writer lock and published with one attribute
    assignment, so a reader that grabs `snapshot` once always sees either the
    old or the new configuration in full. Readers take no lock.
    """

    def __init__(self) -> None:
        self._snapshot: DeliveryConfig | None = None
        self._write_lock = threading.Lock()

    @property
    def snapshot(self) -> DeliveryConfig | None:
        return self._snapshot

    def load(self, source: Path) -> DeliveryConfig:
        """Load `source` and publish it. On failure the previous snapshot stays."""
        with self._write_lock:
            snapshot = read_config_file(Path(source))
            self._snapshot = snapshot

        log.info(
            f"Configuration loaded: delivery_car={snapshot.inbox} "
            f"aliases={len(snapshot.mappings)}"
        )
        return snapshot

    def inbox_path(self) -> Path | None:
        snapshot = self._snapshot
        return snapshot.inbox if snapshot is not None else None

    def resolve_destination(self, alias: str) -> Path | None:
        snapshot = self._snapshot
        if snapshot is None:
            return None
        return snapshot.resolve(alias)
