import pytest

from dataprofile_web.services.recommendations import count_types, generate_recommendations

MIXED = "Random Forest algorithm is recommended for mixed numeric and categorical data"
PCA = "Principal Component Analysis (PCA) can help reduce dimensionality"
TREE = "Decision Tree algorithm works well with categorical data"
TIME_SERIES = "Time Series analysis is recommended for temporal data"
XGBOOST = "XGBoost algorithm performs well on large datasets"
KNN = "K-Nearest Neighbors algorithm works well with smaller datasets"
GRAPH = "Graph visualization is recommended for multi-dimensional data"
BAR = "Bar charts or line graphs are recommended for numeric data visualization"
PIE = "Pie charts are effective for categorical data distribution"


def test_rule_order_for_wide_small_mixed_dataset():
    data_types = {"a": "number", "b": "number", "c": "number", "d": "number", "e": "string"}
    assert generate_recommendations(data_types, 50) == [MIXED, PCA, KNN, GRAPH, PIE]


def test_categorical_heavy_dataset_with_dates():
    data_types = {"when": "date", "city": "string", "ok": "boolean", "n": "number"}
    assert generate_recommendations(data_types, 5000) == [MIXED, TREE, TIME_SERIES, XGBOOST, BAR, PIE]


@pytest.mark.parametrize(
    "row_count, expected",
    [
        (99, [BAR, KNN]),
        (100, [BAR]),
        (1000, [BAR]),
        (1001, [BAR, XGBOOST]),
    ],
)
def test_row_count_rules_are_mutually_exclusive(row_count, expected):
    recs = generate_recommendations({"x": "number"}, row_count)
    assert sorted(recs) == sorted(expected)


def test_numeric_visualization_rules_are_mutually_exclusive():
    three = generate_recommendations({c: "number" for c in "abc"}, 500)
    four = generate_recommendations({c: "number" for c in "abcd"}, 500)
    assert three == [BAR]
    assert four == [PCA, GRAPH]


def test_empty_columns_count_as_nothing():
    assert generate_recommendations({"blank": "empty"}, 500) == []


def test_count_types():
    counts = count_types({"a": "number", "b": "string", "c": "boolean", "d": "date", "e": "empty"}, 7)
    assert (counts.numeric, counts.categorical, counts.date, counts.row_count) == (1, 2, 1, 7)
