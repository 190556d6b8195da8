## routes.py
from __future__ import annotations

from flask import Blueprint, abort, current_app, jsonify, request

from dataprofile_web.adapters.uploads import FileStorageUpload
from dataprofile_web.domain.errors import FileReadError
from dataprofile_web.domain.models import AnalysisResult
from dataprofile_web.repositories.analysis_repository import AnalysisRepository
from dataprofile_web.services.profiling_service import ProfilingService


def _error(message: str, code: int):
    return jsonify({"error": message}), code


def create_blueprint(profiling_service: ProfilingService, analysis_repo: AnalysisRepository) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @bp.post("/analyze")
    def analyze():
        storage = request.files.get("file")
        if storage is None:
            return _error("No file part named 'file' in the request.", 400)
        if not (storage.filename or "").strip():
            return _error("No file selected.", 400)

        try:
            result: AnalysisResult = profiling_service.analyze(FileStorageUpload(storage))
        except FileReadError as e:
            current_app.logger.warning("Upload rejected: %s", e)
            return _error(str(e), 422)

        analysis_id = analysis_repo.add(result)
        current_app.logger.info("Analysis %s stored for %s (%s)", analysis_id, storage.filename, result.file_type)

        return jsonify({"analysisId": analysis_id, "result": result.to_dict()})

    @bp.get("/analysis/<analysis_id>")
    def get_analysis(analysis_id: str):
        result = analysis_repo.get(analysis_id)
        if result is None:
            abort(404)
        return jsonify({"analysisId": analysis_id, "result": result.to_dict()})

    return bp
