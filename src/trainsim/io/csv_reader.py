"""Load an acceleration profile from a CSV file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from ..errors import UpstreamDataError


logger = logging.getLogger(__name__)


def resolve_path(path: str | Path) -> Path:
    """Anchor relative paths at the current working directory."""
    path = Path(path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def load_samples_csv(path: str | Path, column: Optional[str] = None) -> np.ndarray:
    """
    Read one column of floats from ``path``.

    With ``column`` the first row is a header and the named column is used.
    Without it the file has no header and the first column is used.

    Raises
    ------
    UpstreamDataError
        If the file cannot be read, the column is missing, a record is empty or
        not a number, or no records are present. Record numbers are 1-based and
        count data rows only.
    """
    path = resolve_path(path)

    try:
        df = pd.read_csv(
            path,
            header=0 if column is not None else None,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except FileNotFoundError as exc:
        raise UpstreamDataError("csv file not found", path=path) from exc
    except pd.errors.EmptyDataError as exc:
        raise UpstreamDataError("csv file is empty", path=path, column=column) from exc
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise UpstreamDataError(f"failed to load csv file: {exc}", path=path) from exc

    if column is not None:
        if column not in df.columns:
            raise UpstreamDataError("failed to find the desired csv column", path=path, column=column)
        raw = df[column]
    else:
        raw = df.iloc[:, 0]

    if raw.size == 0:
        raise UpstreamDataError("csv file has no records", path=path, column=column)

    text = raw.astype(str).str.strip()
    values = np.empty(text.size, dtype=float)
    for record, entry in enumerate(text, start=1):
        try:
            value = float(entry)
        except ValueError:
            value = float("nan")
        if not np.isfinite(value):
            raise UpstreamDataError(
                f"failed to convert csv entry into float: {entry!r}",
                path=path,
                column=column,
                record=record,
            )
        values[record - 1] = value

    logger.debug("loaded %d samples from %s", values.size, path)
    return values


__all__ = ["load_samples_csv", "resolve_path"]
