from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from dataprofile_web.domain.models import AnalysisResult


@dataclass
class AnalysisRepository:
    """
    Repository pattern: keeps recent analysis results in process memory only.
    Oldest entries are dropped once max_results is exceeded.
    """
    max_results: int = 100
    _results: "OrderedDict[str, AnalysisResult]" = field(default_factory=OrderedDict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def add(self, result: AnalysisResult) -> str:
        analysis_id = uuid.uuid4().hex
        with self._lock:
            self._results[analysis_id] = result
            while len(self._results) > self.max_results:
                self._results.popitem(last=False)
        return analysis_id

    def get(self, analysis_id: str) -> Optional[AnalysisResult]:
        with self._lock:
            return self._results.get(analysis_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
