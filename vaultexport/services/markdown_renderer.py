# vaultexport/services/markdown_renderer.py
from __future__ import annotations

import asyncio
import html as html_lib
from pathlib import Path
from typing import Any, Literal
from urllib.parse import quote

import markdown
from markdown.extensions.toc import slugify

from vaultexport.domain.errors import RenderError
from vaultexport.domain.formats import OutputFormat
from vaultexport.domain.interfaces import IMarkdownRenderer
from vaultexport.domain.models import DocumentView, RenderResult
from vaultexport.utils.constants import CSS_EXPORT, FRAGMENT_TEMPLATE, HTML_TEMPLATE
from vaultexport.utils.frontmatter import parse_frontmatter

MathEngine = Literal["mathjax", "katex"]


def note_anchor(name: str) -> str:
    return "note-" + slugify(name, "-")


def _page_url(label: str, base: str, end: str) -> str:
    return f"{base}{quote(label.strip())}{end}"


def _anchor_url(label: str, base: str, end: str) -> str:
    return "#" + note_anchor(label.strip())


class MarkdownRenderer(IMarkdownRenderer):
    """
    Renders the active document view to HTML with optional LaTeX math support.

    Full renders produce a standalone page (CSS + math scripts). Fragment renders
    produce one <section> per note for concatenation into a single map page, with
    [[wiki links]] rewritten to in-page anchors.
    """

    def __init__(self, math_engine: MathEngine = "mathjax") -> None:
        self.math_engine: MathEngine = math_engine

    # -------------------- IMarkdownRenderer --------------------

    async def render(
        self, view: DocumentView, input_path: Path, fmt: OutputFormat
    ) -> RenderResult:
        metadata = self._metadata(view, input_path, fmt)
        body = await self._render_body(view, _page_url)
        math_assets = self._math_assets(self.math_engine)
        page = HTML_TEMPLATE.format(
            title=html_lib.escape(metadata["title"]),
            css=CSS_EXPORT + math_assets["css"],
            body=body + math_assets["scripts"],
        )
        return RenderResult(html=page, metadata=metadata)

    async def render_fragment(
        self, view: DocumentView, input_path: Path, fmt: OutputFormat
    ) -> RenderResult:
        metadata = self._metadata(view, input_path, fmt)
        body = await self._render_body(view, _anchor_url)
        fragment = FRAGMENT_TEMPLATE.format(
            anchor=note_anchor(view.document.stem),
            title=html_lib.escape(metadata["title"]),
            body=body,
        )
        return RenderResult(html=fragment, metadata=metadata)

    # -------------------- helpers --------------------

    async def _render_body(self, view: DocumentView, build_url) -> str:
        try:
            return await asyncio.to_thread(self.body_html, view.text, build_url)
        except Exception as e:
            raise RenderError(f"Could not render {view.document.path}: {e}") from e

    def body_html(self, markdown_text: str, build_url=_page_url) -> str:
        _, body = parse_frontmatter(markdown_text)
        exts = [
            "extra",
            "fenced_code",
            "codehilite",
            "toc",
            "sane_lists",
            "smarty",
            "wikilinks",
            "pymdownx.arithmatex",
        ]
        ext_cfg = {
            "codehilite": {"guess_lang": True, "noclasses": True},
            "wikilinks": {"base_url": "", "end_url": ".html", "build_url": build_url},
            # 'generic=True' wraps math in <span class="arithmatex"> / <div class="arithmatex">
            "pymdownx.arithmatex": {
                "generic": True,
                "inline_syntax": ["dollar", "round"],
                "block_syntax": ["dollar", "square", "begin"],
            },
        }
        return markdown.markdown(
            body,
            extensions=exts,
            extension_configs=ext_cfg,
            output_format="html",
        )

    @staticmethod
    def _metadata(view: DocumentView, input_path: Path, fmt: OutputFormat) -> dict[str, Any]:
        meta: dict[str, Any] = dict(view.frontmatter)
        title = meta.get("title")
        meta["title"] = str(title) if title else view.document.stem
        meta["source"] = str(input_path)
        meta["format"] = fmt.name
        return meta

    def _math_assets(self, engine: MathEngine) -> dict[str, str]:
        if engine == "katex":
            katex_css = (
                '<link rel="stylesheet" '
                'href="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/katex.min.css">'
            )
            katex_js = """
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/katex.min.js"></script>
<script defer src="https://cdn.jsdelivr.net/npm/katex@0.16.10/dist/contrib/auto-render.min.js"></script>
<script>
document.addEventListener("DOMContentLoaded", function() {
  if (typeof renderMathInElement === "function") {
    renderMathInElement(document.body, {
      delimiters: [
        {left: "\\\\[", right: "\\\\]", display: true},
        {left: "\\\\(", right: "\\\\)", display: false}
      ],
      ignoredTags: ["script", "noscript", "style", "textarea", "pre", "code"]
    });
  }
});
</script>
"""
            return {"css": katex_css, "scripts": katex_js}

        mathjax_cfg = """
<script>
window.MathJax = {
  tex: {
    inlineMath: [['\\\\(', '\\\\)']],
    displayMath: [['\\\\[', '\\\\]']],
    processEscapes: true
  },
  options: {
    skipHtmlTags: ['script', 'noscript', 'style', 'textarea', 'pre', 'code']
  }
};
</script>
"""
        mathjax_js = (
            '<script id="MathJax-script" async '
            'src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"></script>'
        )
        return {"css": "", "scripts": mathjax_cfg + mathjax_js}
