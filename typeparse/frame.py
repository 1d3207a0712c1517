"""
DataFrame column conversion for typeparse.

Raw tables (CSV reads with ``dtype=str``, spreadsheet exports) arrive as
string columns. These helpers run the conversion engine over every cell
so a column can be turned into ``int``, ``timedelta``, ``list[float]``
or any other supported type in one step:

    df = parse_columns(raw, {"port": int, "timeout": timedelta})

Missing cells (``NaN`` / ``None``) are converted as empty text, so they
pick up the target's empty-input behaviour (zero value for leaves,
``None`` for optionals). Conversion errors propagate unchanged; the
first failing cell stops the whole call.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from typeparse.config import ParseConfig, new_config
from typeparse.resolve import resolve

logger = logging.getLogger(__name__)


def parse_column(
    series: pd.Series, target: Any, config: ParseConfig | None = None
) -> pd.Series:
    """Convert every cell of *series* into *target*.

    Args:
        series: Column of strings; missing values are allowed.
        target: Type each cell is converted into.
        config: Options for the conversion; package defaults if None.

    Returns:
        A new Series with the same index and name. pandas infers the
        dtype from the converted values (e.g. int64 for ``int``, object
        for lists and optionals).
    """
    config = config or new_config()
    converter = resolve(target)
    values = [
        converter.convert("" if pd.isna(cell) else str(cell), config).value
        for cell in series.tolist()
    ]
    return pd.Series(values, index=series.index, name=series.name)


def parse_columns(
    df: pd.DataFrame,
    column_types: dict[str, Any],
    config: ParseConfig | None = None,
) -> pd.DataFrame:
    """Convert the named columns of *df*; other columns are left as-is.

    Args:
        df: Input DataFrame (not modified).
        column_types: Maps column name -> target type.
        config: Options shared by every column.

    Returns:
        A converted copy of *df*.

    Raises:
        KeyError: If a name in *column_types* is not a column of *df*.
    """
    missing = [name for name in column_types if name not in df.columns]
    if missing:
        raise KeyError(f"Columns not found in DataFrame: {missing}")

    config = config or new_config()
    df = df.copy()
    for name, target in column_types.items():
        df[name] = parse_column(df[name], target, config)
    logger.debug("Converted %d column(s): %s", len(column_types), list(column_types))
    return df
