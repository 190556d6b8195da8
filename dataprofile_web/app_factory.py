#############################
#
# Key design patterns used
# •	Application Factory: create_app() builds the app and dependencies.
# •	Dependency Injection (manual): dependencies are passed into routes and service constructors.
# •	Service Layer: ProfilingService encapsulates the "analyze one upload" use case.
# •	Repository: AnalysisRepository keeps recent results in memory.
# •	Strategy: UploadSource lets the same service read browser uploads, files on disk or raw bytes.
######################################################################
# Runtime request flow
# •	POST /analyze
# •	web.analyze wraps request.files["file"] in FileStorageUpload
# •	ProfilingService.analyze:
# •	FileLoader reads + decodes (csv/json/txt) or keeps bytes (anything else)
# •	extension picks the csv / json / txt analyzer, or a canned xlsx / unsupported report
# •	analyzers infer column types, statistics and recommendations
# •	returns a frozen AnalysisResult
# •	Route stores it in AnalysisRepository and returns it as JSON
# •	GET /analysis/<analysis_id> returns a stored result again
# ________________________________________

from __future__ import annotations

from pathlib import Path
from typing import Optional

from flask import Flask

from dataprofile_web.config.ini_config import AppSettings, IniConfig
from dataprofile_web.repositories.analysis_repository import AnalysisRepository
from dataprofile_web.services.file_loader import FileLoader
from dataprofile_web.services.profiling_service import ProfilingService
from dataprofile_web.web.routes import create_blueprint


def load_settings(ini_path: Optional[Path] = None) -> AppSettings:
    ini = IniConfig(ini_path) if ini_path else IniConfig.from_env_or_default()
    return ini.load_settings()


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    settings = settings or load_settings()

    loader = FileLoader(
        text_encoding=settings.text_encoding,
        decode_errors=settings.decode_errors,
    )
    profiling_service = ProfilingService(loader=loader)
    analysis_repo = AnalysisRepository(max_results=settings.max_results)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(profiling_service, analysis_repo))

    # Keep header / field order as it appears in the uploaded file
    app.json.sort_keys = False

    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes
    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.config["LOG_LEVEL"] = settings.log_level

    return app
