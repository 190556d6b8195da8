######## models.py
########

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

# Semantic type tags assigned per column
NUMBER = "number"
DATE = "date"
BOOLEAN = "boolean"
STRING = "string"
EMPTY = "empty"


def _frozen(mapping: Optional[Mapping]) -> Optional[Mapping]:
    if mapping is None:
        return None
    return MappingProxyType(dict(mapping))


def _read_only(items) -> Mapping:
    return MappingProxyType(dict(items))


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _rebuild(value: Any, make_mapping: Callable, make_sequence: Callable) -> Any:
    """
    Copy nested mappings and lists bottom-up using the given constructors
    (read-only mappings + tuples to freeze, dict + list to serialize).
    Walks with an explicit stack so deeply nested JSON cannot exhaust the Python stack.
    """
    if not _is_container(value):
        return value

    built: dict[int, Any] = {}
    pending = [(value, False)]
    while pending:
        node, children_ready = pending.pop()
        if id(node) in built:
            continue

        children = list(node.values()) if isinstance(node, Mapping) else list(node)
        if not children_ready:
            pending.append((node, True))
            pending.extend((c, False) for c in children if _is_container(c))
            continue

        copied = [built[id(c)] if _is_container(c) else c for c in children]
        if isinstance(node, Mapping):
            built[id(node)] = make_mapping(zip(node.keys(), copied))
        else:
            built[id(node)] = make_sequence(copied)

    return built[id(value)]


@dataclass(frozen=True)
class ColumnStatistics:
    min: float
    max: float
    mean: float
    median: float
    std_dev: float
    count: int

    def to_dict(self) -> dict[str, float]:
        return {
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "median": self.median,
            "stdDev": self.std_dev,
            "count": self.count,
        }


@dataclass(frozen=True)
class TextStatistics:
    word_count: int
    char_count: int
    avg_words_per_line: float

    def to_dict(self) -> dict[str, float]:
        return {
            "wordCount": self.word_count,
            "charCount": self.char_count,
            "avgWordsPerLine": self.avg_words_per_line,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Profiling report for one uploaded file.
    Optional fields stay None when they do not apply to the file (e.g. malformed JSON).
    """
    summary: str
    file_type: str
    file_size: str
    row_count: Optional[int] = None
    column_count: Optional[int] = None
    headers: Optional[Tuple[str, ...]] = None
    data_types: Optional[Mapping[str, str]] = None
    sample_data: Optional[Tuple[Mapping[str, Any], ...]] = None
    statistics: Optional[Mapping[str, ColumnStatistics]] = None
    recommendations: Tuple[str, ...] = ()
    text_statistics: Optional[TextStatistics] = None

    def __post_init__(self):
        # Freeze collections so the record cannot be mutated through a shared reference
        if self.headers is not None:
            object.__setattr__(self, "headers", tuple(self.headers))
        if self.sample_data is not None:
            object.__setattr__(self, "sample_data", _rebuild(tuple(self.sample_data), _read_only, tuple))
        object.__setattr__(self, "data_types", _frozen(self.data_types))
        object.__setattr__(self, "statistics", _frozen(self.statistics))
        object.__setattr__(self, "recommendations", tuple(self.recommendations))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict using the camelCase keys the browser client expects."""
        out: dict[str, Any] = {
            "summary": self.summary,
            "fileType": self.file_type,
            "fileSize": self.file_size,
        }
        if self.row_count is not None:
            out["rowCount"] = self.row_count
        if self.column_count is not None:
            out["columnCount"] = self.column_count
        if self.headers is not None:
            out["headers"] = list(self.headers)
        if self.data_types is not None:
            out["dataTypes"] = dict(self.data_types)
        if self.sample_data is not None:
            out["sampleData"] = _rebuild(self.sample_data, dict, list)
        if self.statistics is not None:
            out["statistics"] = {name: stats.to_dict() for name, stats in self.statistics.items()}
        out["recommendations"] = list(self.recommendations)
        if self.text_statistics is not None:
            out["textStatistics"] = self.text_statistics.to_dict()
        return out
