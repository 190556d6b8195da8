from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping

from dataprofile_web.adapters.uploads import UploadSource
from dataprofile_web.domain.models import AnalysisResult
from dataprofile_web.services.analyzers import analyze_csv, analyze_json, analyze_txt
from dataprofile_web.services.file_loader import FileLoader

logger = logging.getLogger(__name__)

ANALYZERS: Mapping[str, Callable[[Any], Dict[str, Any]]] = {
    "csv": analyze_csv,
    "json": analyze_json,
    "txt": analyze_txt,
}

EXCEL_SUMMARY = "Excel file detected. Basic metadata analysis available."
EXCEL_RECOMMENDATIONS = (
    "Consider converting to CSV for more detailed analysis",
    "Use Random Forest algorithm for classification tasks",
    "Export as graph visualization for better insights",
)
UNSUPPORTED_SUMMARY = "Unsupported file format. Limited analysis available."
UNSUPPORTED_RECOMMENDATIONS = ("Convert to a supported format (CSV, JSON, TXT)",)


@dataclass
class ProfilingService:
    """
    Service layer: reads one upload, routes it to the analyzer for its format
    and returns a fresh AnalysisResult.
    Only FileReadError escapes; content problems end up in the report itself.
    """
    loader: FileLoader = field(default_factory=FileLoader)

    def analyze(self, source: UploadSource) -> AnalysisResult:
        loaded = self.loader.load(source)

        analyzer = ANALYZERS.get(loaded.file_type)
        if analyzer is not None:
            fields = analyzer(loaded.content)
        elif loaded.file_type == "xlsx":
            fields = {"summary": EXCEL_SUMMARY, "recommendations": EXCEL_RECOMMENDATIONS}
        else:
            fields = {"summary": UNSUPPORTED_SUMMARY, "recommendations": UNSUPPORTED_RECOMMENDATIONS}

        result = AnalysisResult(file_type=loaded.file_type, file_size=loaded.file_size, **fields)

        logger.info(
            "Analyzed %s type=%s size=%s rows=%s",
            source.name, result.file_type, result.file_size, result.row_count,
        )
        return result
