from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from dataprofile_web.domain.models import ColumnStatistics
from dataprofile_web.services.type_inference import is_number


def to_numbers(values: Iterable[Any]) -> list[float]:
    """Finite floats among the values, in order. Everything else is discarded."""
    return [float(v) for v in values if is_number(v)]


def calculate_statistics(values: Sequence[float]) -> Optional[ColumnStatistics]:
    """
    Descriptive statistics for a numeric column.
    Returns None for an empty sequence so callers never report zeros for missing data.
    """
    vals = np.asarray(values, dtype=float)
    if vals.size == 0:
        return None

    return ColumnStatistics(
        min=float(np.min(vals)),
        max=float(np.max(vals)),
        mean=float(np.mean(vals)),
        median=float(np.median(vals)),
        # np.std defaults to ddof=0 (population standard deviation)
        std_dev=float(np.std(vals)),
        count=int(vals.size),
    )
