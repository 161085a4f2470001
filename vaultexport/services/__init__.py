"""Concrete service implementations and export strategies."""

from .capabilities import CapabilityMap, CapabilityRegistry, detect_capabilities
from .eligibility import can_export
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .settings_service import SettingsService
from .workspace import Vault, Workspace

__all__ = [
    "CapabilityMap",
    "CapabilityRegistry",
    "detect_capabilities",
    "can_export",
    "FileService",
    "MarkdownRenderer",
    "SettingsService",
    "Vault",
    "Workspace",
]
