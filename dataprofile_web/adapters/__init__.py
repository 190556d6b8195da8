from .uploads import FileStorageUpload, InMemoryUpload, PathUpload, UploadSource

__all__ = [
    "UploadSource",
    "InMemoryUpload",
    "PathUpload",
    "FileStorageUpload",
]
