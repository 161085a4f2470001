from __future__ import annotations

from dataclasses import dataclass

from vaultexport.domain.errors import UnknownFormatError

INPUT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")


@dataclass(frozen=True)
class OutputFormat:
    name: str
    label: str
    extension: str
    pandoc_format: str | None = None
    needs_converter: bool = False
    needs_typesetting: bool = False

    @property
    def subfolder(self) -> str:
        return self.name


def _pandoc(name: str, label: str, extension: str, pandoc_format: str | None = None,
            *, latex: bool = False) -> OutputFormat:
    return OutputFormat(
        name=name,
        label=label,
        extension=extension,
        pandoc_format=pandoc_format or name,
        needs_converter=True,
        needs_typesetting=latex,
    )


HTML = OutputFormat(name="html", label="HTML", extension=".html")
MAP = OutputFormat(name="map", label="Mind map", extension=".html")

OUTPUT_FORMATS: tuple[OutputFormat, ...] = (
    HTML,
    MAP,
    _pandoc("asciidoc", "AsciiDoc", ".adoc"),
    _pandoc("docx", "Word Document", ".docx"),
    _pandoc("epub", "ePub", ".epub"),
    _pandoc("latex", "LaTeX", ".tex"),
    _pandoc("md", "Markdown", ".md", "commonmark_x"),
    _pandoc("dokuwiki", "DokuWiki", ".txt"),
    _pandoc("odt", "OpenDocument", ".odt"),
    # pandoc picks the PDF writer from the .pdf output name and the engine flag
    _pandoc("pdf", "PDF", ".pdf", "latex", latex=True),
    _pandoc("pptx", "PowerPoint", ".pptx"),
    _pandoc("revealjs", "Reveal.js Slides", ".reveal.html"),
    _pandoc("beamer", "Beamer Slides", ".beamer.pdf", latex=True),
    _pandoc("mediawiki", "MediaWiki", ".mediawiki"),
    _pandoc("rst", "reStructuredText", ".rst"),
)

_BY_NAME = {f.name: f for f in OUTPUT_FORMATS}


def get_format(name: str | OutputFormat) -> OutputFormat:
    if isinstance(name, OutputFormat):
        return name
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownFormatError(name) from None


def format_names() -> list[str]:
    return [f.name for f in OUTPUT_FORMATS]


def is_supported_input(path: str) -> bool:
    lowered = path.lower()
    return any(lowered.endswith(ext) for ext in INPUT_EXTENSIONS)
