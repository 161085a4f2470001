"""Exporter strategies and registry."""

from .base import ExporterRegistryInst
from .html_exporter import HtmlExporter
from .pandoc_exporter import PandocExporter

__all__ = ["ExporterRegistryInst", "HtmlExporter", "PandocExporter"]
