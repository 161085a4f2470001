"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_EXPORT,
    DEFAULT_MAP_FILENAME,
    FRAGMENT_TEMPLATE,
    HTML_TEMPLATE,
    MAP_FOOTER,
    MAP_HEADER,
    NOTICE_ERROR_MS,
    SETTINGS_EXTRA_ARGUMENTS,
    SETTINGS_LAST_ACTIVE,
    SETTINGS_OUTPUT_FOLDER,
    SETTINGS_PANDOC_PATH,
    SETTINGS_PDFLATEX_PATH,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_EXPORT",
    "HTML_TEMPLATE",
    "FRAGMENT_TEMPLATE",
    "MAP_HEADER",
    "MAP_FOOTER",
    "DEFAULT_MAP_FILENAME",
    "NOTICE_ERROR_MS",
    "SETTINGS_PANDOC_PATH",
    "SETTINGS_PDFLATEX_PATH",
    "SETTINGS_OUTPUT_FOLDER",
    "SETTINGS_EXTRA_ARGUMENTS",
    "SETTINGS_LAST_ACTIVE",
]
