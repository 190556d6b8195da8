"""
Structural analyzers, one per supported format.

Each analyzer takes already-loaded content and returns the AnalysisResult
fields it can determine. None of them raise for malformed content: ragged
rows, blank lines and invalid JSON all degrade into a smaller report.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from dataprofile_web.domain.models import NUMBER, ColumnStatistics, TextStatistics
from dataprofile_web.services.recommendations import generate_recommendations
from dataprofile_web.services.statistics import calculate_statistics, to_numbers
from dataprofile_web.services.type_inference import detect_data_type

SAMPLE_ROWS = 5

INVALID_JSON_RECOMMENDATIONS = (
    "Check the JSON format and try again",
    "Ensure the file contains valid JSON data",
)
TABULAR_TEXT_RECOMMENDATIONS = (
    "Convert to CSV format for better analysis",
    "Use text classification algorithms for content analysis",
    "Consider natural language processing for text extraction",
)
FREE_TEXT_RECOMMENDATIONS = (
    "Use natural language processing algorithms",
    "Consider sentiment analysis for text content",
    "Text clustering may reveal patterns in the content",
)


def _non_blank_lines(text: str) -> List[str]:
    return [line for line in text.split("\n") if line.strip() != ""]


def _numeric_statistics(
    headers: Sequence[str],
    data_types: Dict[str, str],
    columns: Sequence[Sequence[Any]],
) -> Optional[Dict[str, ColumnStatistics]]:
    """Stats per numeric header; None when no header is numeric."""
    statistics: Dict[str, ColumnStatistics] = {}
    for header, values in zip(headers, columns):
        if data_types[header] != NUMBER:
            continue
        stats = calculate_statistics(to_numbers(values))
        if stats is not None:
            statistics[header] = stats
    return statistics or None


def _count_numeric(data_types: Dict[str, str]) -> int:
    return sum(1 for t in data_types.values() if t == NUMBER)


def _field(item: Any, header: str) -> Any:
    """Value of one header in a JSON element; None when the element does not have it."""
    if isinstance(item, dict):
        return item.get(header)
    # Arrays are indexed only by canonical positions ("1", not "01")
    if isinstance(item, list) and header.isdecimal() and str(int(header)) == header:
        i = int(header)
        return item[i] if i < len(item) else None
    return None


def analyze_csv(text: str) -> Dict[str, Any]:
    lines = _non_blank_lines(text)
    if not lines:
        return {
            "summary": "Empty CSV file detected.",
            "row_count": 0,
            "column_count": 0,
        }

    # Naive comma split: quoted fields containing commas are not supported
    headers = [h.strip() for h in lines[0].split(",")]
    column_count = len(headers)
    rows = [[v.strip() for v in line.split(",")] for line in lines[1:]]
    row_count = len(lines) - 1

    sample_data = [
        {header: (row[i] if i < len(row) else "") for i, header in enumerate(headers)}
        for row in rows[:SAMPLE_ROWS]
    ]

    columns = [[row[i] if i < len(row) else None for row in rows] for i in range(column_count)]

    data_types: Dict[str, str] = {}
    for header, values in zip(headers, columns):
        data_types[header] = detect_data_type(values)

    numeric = _count_numeric(data_types)

    return {
        "summary": (
            f"CSV file with {row_count} rows and {column_count} columns. "
            f"Contains {numeric} numeric columns suitable for analysis."
        ),
        "row_count": row_count,
        "column_count": column_count,
        "headers": headers,
        "data_types": data_types,
        "sample_data": sample_data,
        "statistics": _numeric_statistics(headers, data_types, columns),
        "recommendations": generate_recommendations(data_types, row_count),
    }


def analyze_json(content: Any) -> Dict[str, Any]:
    # An empty object is what a failed parse degrades to, so it is reported as invalid too
    if content is None or not isinstance(content, (dict, list)) or content == {}:
        return {
            "summary": "Empty or invalid JSON file.",
            "recommendations": INVALID_JSON_RECOMMENDATIONS,
        }

    headers: List[str] = []
    columns: List[List[Any]] = []

    if isinstance(content, list):
        row_count = len(content)
        sample_data = content[:SAMPLE_ROWS]

        # Schema comes from the first element only
        if content and isinstance(content[0], dict):
            headers = list(content[0].keys())
            columns = [[_field(item, h) for item in content] for h in headers]
        elif content and isinstance(content[0], list):
            # Rows given as arrays: positions become the headers "0", "1", ...
            headers = [str(i) for i in range(len(content[0]))]
            columns = [[_field(item, h) for item in content] for h in headers]
    else:
        row_count = 1
        sample_data = [content]
        headers = list(content.keys())
        columns = [[content[h]] for h in headers]

    data_types: Dict[str, str] = {}
    for header, values in zip(headers, columns):
        data_types[header] = detect_data_type(values)

    column_count = len(headers)
    numeric = _count_numeric(data_types)

    return {
        "summary": (
            f"JSON file with {row_count} records and {column_count} fields. "
            f"Contains {numeric} numeric fields suitable for analysis."
        ),
        "row_count": row_count,
        "column_count": column_count,
        "headers": headers,
        "data_types": data_types,
        "sample_data": sample_data,
        "statistics": _numeric_statistics(headers, data_types, columns),
        "recommendations": generate_recommendations(data_types, row_count),
    }


def analyze_txt(text: str) -> Dict[str, Any]:
    lines = _non_blank_lines(text)
    word_count = len([w for w in re.split(r"\s+", text) if w.strip() != ""])
    char_count = len(text)

    first_tabs = lines[0].count("\t") if lines else 0
    is_tabular = bool(lines) and all(
        line.count("\t") > 0 and line.count("\t") == first_tabs for line in lines
    )

    if is_tabular:
        summary = (
            f"Text file with {len(lines)} rows that appears to be tab-delimited. "
            f"Contains approximately {word_count} words."
        )
        recommendations = TABULAR_TEXT_RECOMMENDATIONS
    else:
        summary = f"Unstructured text file with {len(lines)} lines and {word_count} words."
        recommendations = FREE_TEXT_RECOMMENDATIONS

    return {
        "summary": summary,
        "row_count": len(lines),
        "column_count": len(lines[0].split("\t")) if is_tabular else None,
        "recommendations": recommendations,
        "text_statistics": TextStatistics(
            word_count=word_count,
            char_count=char_count,
            avg_words_per_line=word_count / (len(lines) or 1),
        ),
    }
