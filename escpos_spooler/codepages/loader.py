"""Loader for the codepage table resource."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
import logging
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from ..const import DEFAULT_CODEPAGE
from ..exceptions import CodepageTableError
from ..text_utils.codepage_mapping import get_codec_name

_LOGGER = logging.getLogger(__name__)

CODEPAGE_RESOURCE = "codepages.yaml"

ENTRY_SCHEMA = vol.Schema(
    {
        vol.Required("name"): vol.All(str, vol.Length(min=1)),
        vol.Optional("codec"): vol.All(str, vol.Length(min=1)),
        vol.Optional("substitutions", default=dict): {str: str},
    }
)

TABLE_SCHEMA = vol.Schema({int: ENTRY_SCHEMA})


@dataclass(frozen=True)
class CodepageEntry:
    """One codepage of the table."""

    id: int
    name: str
    codec: str
    substitutions: dict[str, str] = field(default_factory=dict)


def _parse_table(raw_text: str, source: str) -> dict[int, CodepageEntry]:
    try:
        raw: Any = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise CodepageTableError(f"Invalid YAML in codepage table {source}: {err}") from err

    try:
        validated = TABLE_SCHEMA(raw)
    except vol.Invalid as err:
        raise CodepageTableError(f"Invalid codepage table {source}: {err}") from err

    table: dict[int, CodepageEntry] = {}
    for codepage_id, entry in validated.items():
        codec = entry.get("codec") or get_codec_name(entry["name"])
        try:
            codecs.lookup(codec)
        except LookupError as err:
            raise CodepageTableError(
                f"Codepage {codepage_id} ({entry['name']}) uses unknown codec '{codec}'"
            ) from err
        table[codepage_id] = CodepageEntry(
            id=codepage_id,
            name=entry["name"],
            codec=codec,
            substitutions=dict(entry["substitutions"]),
        )

    if DEFAULT_CODEPAGE not in table:
        raise CodepageTableError(f"Codepage table {source} has no entry for codepage {DEFAULT_CODEPAGE}")

    _LOGGER.debug("Loaded %s codepages from %s", len(table), source)
    return table


@lru_cache(maxsize=1)
def _load_packaged_table() -> dict[int, CodepageEntry]:
    resource = resources.files(__package__).joinpath(CODEPAGE_RESOURCE)
    try:
        raw_text = resource.read_text(encoding="utf-8")
    except OSError as err:
        raise CodepageTableError(f"Cannot read packaged codepage table: {err}") from err
    return _parse_table(raw_text, CODEPAGE_RESOURCE)


def load_codepage_table(path: str | Path | None = None) -> dict[int, CodepageEntry]:
    """Load the codepage table.

    Args:
        path: YAML file to load instead of the packaged table.

    Returns:
        Mapping of codepage id to its entry.

    Raises:
        CodepageTableError: The table is missing, malformed or names an
            unknown codec.
    """
    if path is None:
        return dict(_load_packaged_table())

    try:
        raw_text = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise CodepageTableError(f"Cannot read codepage table {path}: {err}") from err
    return _parse_table(raw_text, str(path))


def clear_codepage_cache() -> None:
    """Clear the cached packaged table."""
    _load_packaged_table.cache_clear()
