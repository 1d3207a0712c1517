"""
Parse configuration for typeparse.

``ParseConfig`` is the immutable options bundle threaded through every
recursive conversion. It is built once per top-level call (or once up
front and reused via the ``*_with`` entry points) from the package
defaults plus caller-supplied option functions:

    config = new_config(with_separator(";"), with_time_layout("%Y-%m-%d"))

Options are applied in the order given; each overwrites one field. No
validation is performed on the values themselves -- an empty separator
is accepted and splits text into single characters.

Package defaults:
  The defaults live in this module and are only changed through
  ``configure_defaults()``. Call it once at program start-up, before the
  first conversion, from a single thread. ``reset_defaults()`` restores
  the built-in values (mainly for tests).

Config files:
  ``load_config()`` / ``save_config()`` map a ``ParseConfig`` to a small
  YAML document so the same options can be shared between programs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from typeparse.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# RFC 3339 in strptime notation; %z accepts "Z" as well as "+01:00"
BUILTIN_TIME_LAYOUT = "%Y-%m-%dT%H:%M:%S%z"
BUILTIN_SEPARATOR = ","
BUILTIN_RECORD_FORMAT = "json"

RecordFormat = Literal["json", "yaml"]

_defaults: dict[str, Any] = {
    "time_layout": BUILTIN_TIME_LAYOUT,
    "separator": BUILTIN_SEPARATOR,
    "record_format": BUILTIN_RECORD_FORMAT,
}


class ParseConfig(BaseModel):
    """Options shared by every conversion in one call tree."""

    model_config = ConfigDict(frozen=True)

    time_layout: str = Field(
        BUILTIN_TIME_LAYOUT,
        description="strptime pattern used for datetime and date targets",
    )
    separator: str = Field(
        BUILTIN_SEPARATOR,
        description="Delimiter between elements of list and tuple targets",
    )
    record_format: RecordFormat = Field(
        BUILTIN_RECORD_FORMAT,
        description="Text encoding of structured records: 'json' or 'yaml'",
    )


# An option receives the field dict under construction and overwrites one key.
Option = Callable[[dict[str, Any]], None]


def with_time_layout(layout: str) -> Option:
    """Use *layout* (strptime notation) for datetime and date targets."""

    def _apply(fields: dict[str, Any]) -> None:
        fields["time_layout"] = layout

    return _apply


def with_separator(separator: str) -> Option:
    """Split list and tuple inputs on *separator*."""

    def _apply(fields: dict[str, Any]) -> None:
        fields["separator"] = separator

    return _apply


def with_record_format(record_format: RecordFormat) -> Option:
    """Decode structured records from ``"json"`` or ``"yaml"`` text."""

    def _apply(fields: dict[str, Any]) -> None:
        fields["record_format"] = record_format

    return _apply


def new_config(*options: Option) -> ParseConfig:
    """Build a ParseConfig from the package defaults plus *options*.

    Args:
        *options: Option functions from ``with_*``; later ones win.

    Returns:
        A frozen ParseConfig.
    """
    fields = dict(_defaults)
    for option in options:
        option(fields)
    return ParseConfig(**fields)


def configure_defaults(
    time_layout: str | None = None,
    separator: str | None = None,
    record_format: RecordFormat | None = None,
) -> None:
    """Replace package-wide defaults used by ``new_config()``.

    Must be called before the first conversion and from one thread only;
    configs that were already built keep their values.
    """
    if time_layout is not None:
        _defaults["time_layout"] = time_layout
    if separator is not None:
        _defaults["separator"] = separator
    if record_format is not None:
        _defaults["record_format"] = record_format
    logger.debug("Package defaults now %s", _defaults)


def reset_defaults() -> None:
    """Restore the built-in package defaults."""
    _defaults.update(
        time_layout=BUILTIN_TIME_LAYOUT,
        separator=BUILTIN_SEPARATOR,
        record_format=BUILTIN_RECORD_FORMAT,
    )


def load_config(path: str | Path, *options: Option) -> ParseConfig:
    """Load a ParseConfig from a YAML file.

    Keys missing from the file fall back to the package defaults;
    *options* are applied after the file's values.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If a value has the wrong type.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )

    fields = dict(_defaults)
    fields.update(raw)
    for option in options:
        option(fields)
    config = ParseConfig.model_validate(fields)
    logger.info("Loaded parse config from %s", path)
    return config


def save_config(config: ParseConfig, path: str | Path) -> None:
    """Serialize a ParseConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# typeparse configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved parse config to %s", path)
