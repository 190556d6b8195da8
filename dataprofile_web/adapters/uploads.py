from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from werkzeug.datastructures import FileStorage


class UploadSource:
    """
    Strategy interface for a single uploaded file.
    The loader only needs a name, a byte size and one way to read the content.
    """
    name: str

    @property
    def size(self) -> int:
        raise NotImplementedError

    def read_bytes(self) -> bytes:
        raise NotImplementedError


@dataclass(frozen=True)
class InMemoryUpload(UploadSource):
    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def read_bytes(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class PathUpload(UploadSource):
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


class FileStorageUpload(UploadSource):
    """
    Adapter around a Werkzeug FileStorage (Flask request.files entry).
    The multipart stream is consumed once and kept, since content_length is
    usually not sent by browsers.
    """

    def __init__(self, storage: FileStorage):
        self.name = storage.filename or ""
        self._storage = storage
        self._data: bytes | None = None

    def _load(self) -> bytes:
        if self._data is None:
            self._data = self._storage.read()
        return self._data

    @property
    def size(self) -> int:
        return len(self._load())

    def read_bytes(self) -> bytes:
        return self._load()
