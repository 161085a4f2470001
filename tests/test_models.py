from pathlib import Path

import pytest

from vaultexport.domain.models import Document, DocumentView, RenderResult


def test_document_properties(tmp_path):
    p = tmp_path / "notes" / "Daily.MD"
    d = Document(path="notes/Daily.MD", absolute_path=p)
    assert d.extension == ".md"
    assert d.stem == "Daily"


def test_document_is_immutable():
    d = Document(path="a.md", absolute_path=Path("/v/a.md"))
    with pytest.raises(AttributeError):
        d.path = "b.md"  # type: ignore[misc]


def test_view_and_result_defaults():
    d = Document(path="a.md", absolute_path=Path("/v/a.md"))
    v = DocumentView(document=d, text="hi")
    assert v.frontmatter == {}
    assert RenderResult(html="<p/>").metadata == {}
