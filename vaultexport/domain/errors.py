from __future__ import annotations


class VaultExportError(Exception):
    """Base class for errors raised by vaultexport."""


class UnknownFormatError(VaultExportError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown output format: {name!r}")
        self.name = name


class VaultNotFoundError(VaultExportError):
    """The vault root is missing, so no documents can be enumerated."""


class RenderError(VaultExportError):
    pass


class ConversionError(VaultExportError):
    """The external converter exited with an error."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
