from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from dataprofile_web.adapters.uploads import UploadSource
from dataprofile_web.domain.errors import FileReadError

logger = logging.getLogger(__name__)

TEXT_FILE_TYPES = frozenset({"csv", "json", "txt"})
SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not part of JSON
    raise ValueError(f"invalid JSON constant {name}")


def get_file_type(file_name: str) -> str:
    """Lower-cased extension after the last dot, '' when there is none."""
    name = file_name or ""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"

    k = 1024
    i = 0
    value = float(num_bytes)
    while value >= k and i < len(SIZE_UNITS) - 1:
        value /= k
        i += 1

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[i]}"


@dataclass(frozen=True)
class LoadedFile:
    file_type: str
    file_size: str
    content: Any


@dataclass(frozen=True)
class FileLoader:
    """
    Reads an upload once and returns text (csv/txt), parsed JSON (json) or raw bytes.
    Read and decode failures are raised as FileReadError; JSON syntax errors are not.
    """
    text_encoding: str = "utf-8-sig"
    decode_errors: str = "strict"

    def load(self, source: UploadSource) -> LoadedFile:
        file_type = get_file_type(source.name)

        try:
            raw = source.read_bytes()
            size = source.size
        except OSError as e:
            raise FileReadError(source.name, str(e)) from e

        return LoadedFile(
            file_type=file_type,
            file_size=format_file_size(size),
            content=self.decode(source.name, file_type, raw),
        )

    def decode(self, file_name: str, file_type: str, raw: bytes) -> Any:
        if file_type not in TEXT_FILE_TYPES:
            return raw

        try:
            text = raw.decode(self.text_encoding, errors=self.decode_errors)
        except UnicodeDecodeError as e:
            raise FileReadError(file_name, f"not valid {self.text_encoding} text ({e.reason})") from e

        if file_type != "json":
            return text

        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # Malformed or too deeply nested JSON degrades to an empty object
            logger.warning("JSON parse error in %s: %s", file_name, e)
            return {}
