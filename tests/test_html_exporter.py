import pytest

from vaultexport.services.exporters.html_exporter import HtmlExporter


def test_html_exporter_writes_file(tmp_path):
    exp = HtmlExporter()
    out = tmp_path / "html" / "out.html"
    exp.export("<html>ok</html>", out)
    assert out.read_text(encoding="utf-8") == "<html>ok</html>"


def test_html_exporter_overwrites_existing(tmp_path):
    exp = HtmlExporter()
    out = tmp_path / "out.html"
    out.write_text("stale", encoding="utf-8")
    exp.export("<html>fresh</html>", out)
    assert out.read_text(encoding="utf-8") == "<html>fresh</html>"


def test_html_exporter_permission_error(monkeypatch, tmp_path):
    exp = HtmlExporter()
    out = tmp_path / "out.html"

    monkeypatch.setattr(
        "vaultexport.services.file_service.FileService.write_text_atomic",
        lambda *a, **k: (_ for _ in ()).throw(PermissionError("nope")),
    )
    with pytest.raises(PermissionError):
        exp.export("<html>ok</html>", out)
