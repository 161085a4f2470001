"""Domain layer: interfaces, formats, errors and simple models (dataclasses)."""

from .errors import (
    ConversionError,
    RenderError,
    UnknownFormatError,
    VaultExportError,
    VaultNotFoundError,
)
from .formats import INPUT_EXTENSIONS, OUTPUT_FORMATS, OutputFormat, get_format
from .interfaces import IExporter, IFileService, IMarkdownRenderer, ISettingsService
from .models import Document, DocumentView, RenderResult

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "ISettingsService",
    "IExporter",
    "Document",
    "DocumentView",
    "RenderResult",
    "OutputFormat",
    "OUTPUT_FORMATS",
    "INPUT_EXTENSIONS",
    "get_format",
    "VaultExportError",
    "UnknownFormatError",
    "VaultNotFoundError",
    "RenderError",
    "ConversionError",
]
