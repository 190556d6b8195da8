from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from dataprofile_web.domain.models import BOOLEAN, DATE, NUMBER, STRING


@dataclass(frozen=True)
class TypeCounts:
    numeric: int
    categorical: int
    date: int
    row_count: int


def count_types(data_types: Mapping[str, str], row_count: int) -> TypeCounts:
    tags = list(data_types.values())
    return TypeCounts(
        numeric=sum(1 for t in tags if t == NUMBER),
        categorical=sum(1 for t in tags if t in (STRING, BOOLEAN)),
        date=sum(1 for t in tags if t == DATE),
        row_count=row_count,
    )


@dataclass(frozen=True)
class RecommendationRule:
    applies: Callable[[TypeCounts], bool]
    message: str


# Evaluated top to bottom; each rule contributes at most one message.
# Paired rules (row count, numeric visualization) carry mutually exclusive predicates.
RULES: Sequence[RecommendationRule] = (
    RecommendationRule(
        lambda c: c.numeric > 0 and c.categorical > 0,
        "Random Forest algorithm is recommended for mixed numeric and categorical data",
    ),
    RecommendationRule(
        lambda c: c.numeric > 3,
        "Principal Component Analysis (PCA) can help reduce dimensionality",
    ),
    RecommendationRule(
        lambda c: c.categorical > c.numeric,
        "Decision Tree algorithm works well with categorical data",
    ),
    RecommendationRule(
        lambda c: c.date > 0,
        "Time Series analysis is recommended for temporal data",
    ),
    RecommendationRule(
        lambda c: c.row_count > 1000,
        "XGBoost algorithm performs well on large datasets",
    ),
    RecommendationRule(
        lambda c: c.row_count < 100,
        "K-Nearest Neighbors algorithm works well with smaller datasets",
    ),
    RecommendationRule(
        lambda c: c.numeric > 3,
        "Graph visualization is recommended for multi-dimensional data",
    ),
    RecommendationRule(
        lambda c: 0 < c.numeric <= 3,
        "Bar charts or line graphs are recommended for numeric data visualization",
    ),
    RecommendationRule(
        lambda c: c.categorical > 0,
        "Pie charts are effective for categorical data distribution",
    ),
)


def generate_recommendations(data_types: Mapping[str, str], row_count: int) -> list[str]:
    counts = count_types(data_types, row_count)
    return [rule.message for rule in RULES if rule.applies(counts)]
