from .errors import FileReadError
from .models import AnalysisResult, ColumnStatistics, TextStatistics

__all__ = [
    "AnalysisResult",
    "ColumnStatistics",
    "TextStatistics",
    "FileReadError",
]
