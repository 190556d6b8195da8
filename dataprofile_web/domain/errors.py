class FileReadError(RuntimeError):
    """Raised when an upload cannot be read or decoded. No partial result is produced."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(f"Error reading file {file_name!r}: {reason}")
        self.file_name = file_name
        self.reason = reason
