########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

INI_DEFAULT_NAME = "dataprofile_web.ini"

DECODE_ERROR_POLICIES = ("strict", "replace", "ignore")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppSettings:
    flask_host: str
    flask_port: int
    flask_debug: bool

    max_upload_bytes: int
    text_encoding: str
    decode_errors: str

    max_results: int

    log_level: str


class IniConfig:
    """
    Adapter around ConfigParser.
    Keeps INI handling out of the service and web code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_str(self, section: str, key: str, default: str) -> str:
        return (self._cfg.get(section, key, fallback=default) or "").strip() or default

    def load_settings(self) -> AppSettings:
        # Flask
        flask_host = self._cfg_str("flask", "host", "127.0.0.1")
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=True)

        # Upload handling
        max_upload_mb = self._cfg.getint("upload", "max_upload_mb", fallback=50)
        text_encoding = self._cfg_str("upload", "text_encoding", "utf-8-sig")
        decode_errors = self._cfg_str("upload", "decode_errors", "strict").lower()

        # In-memory results
        max_results = self._cfg.getint("results", "max_results", fallback=100)

        log_level = self._cfg_str("logging", "level", "INFO").upper()

        # Validate
        if max_upload_mb <= 0:
            raise ValueError(f"upload.max_upload_mb must be positive, got {max_upload_mb}")
        if decode_errors not in DECODE_ERROR_POLICIES:
            raise ValueError(f"upload.decode_errors must be one of {DECODE_ERROR_POLICIES}, got {decode_errors!r}")
        if max_results <= 0:
            raise ValueError(f"results.max_results must be positive, got {max_results}")
        if log_level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {LOG_LEVELS}, got {log_level!r}")

        return AppSettings(
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            max_upload_bytes=max_upload_mb * 1024 * 1024,
            text_encoding=text_encoding,
            decode_errors=decode_errors,
            max_results=max_results,
            log_level=log_level,
        )
