from pathlib import Path


class ConfigManagerError(Exception):
    """Base user-facing application error."""


class ConfigFileError(ConfigManagerError):
    def __init__(self, path: Path | str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidJsonFormatError(ConfigFileError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(ConfigFileError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class FileOperationError(ConfigFileError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=detail)


class PathIsDirectoryError(FileOperationError):
    MESSAGE = (
        "This path is a directory. "
        "Please select a file within it to view its contents."
    )

    def __init__(self, path: Path | str) -> None:
        super().__init__(path=path, detail=self.MESSAGE)
