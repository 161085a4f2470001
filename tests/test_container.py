from vaultexport.domain.formats import OUTPUT_FORMATS
from vaultexport.services.exporters import HtmlExporter, PandocExporter


def test_container_wires_services_and_registers_exporters(make_container, vault_dir):
    c = make_container(vault_dir)
    assert c.renderer is not None
    assert c.file_service is not None
    assert c.settings_service is not None
    assert c.vault.root == vault_dir.resolve()

    names = [e.name for e in c.exporters.all()]
    assert "html" in names and "pdf" in names and "docx" in names
    assert "map" not in names
    assert isinstance(c.exporters.get("html"), HtmlExporter)
    assert isinstance(c.exporters.get("rst"), PandocExporter)
    assert len(names) == len([f for f in OUTPUT_FORMATS if f.name != "map"])


def test_container_shares_one_workspace(make_container, vault_dir):
    c = make_container(vault_dir)
    assert c.orchestrator.workspace is c.workspace
    assert c.map_aggregator.workspace is c.workspace
    assert c.plugin.workspace is c.workspace


def test_map_filename_comes_from_config(tmp_path, qsettings, vault_dir):
    from vaultexport.di.container import Container
    from vaultexport.services.config.ini_config_service import IniConfigService

    ini = tmp_path / "app.ini"
    ini.write_text("[export]\nmap_filename = overview.html\n", encoding="utf-8")
    c = Container(vault_dir, qsettings=qsettings, config=IniConfigService(explicit_path=ini))
    assert c.map_aggregator.destination() == vault_dir.resolve() / "overview.html"


def test_math_engine_comes_from_config(tmp_path, qsettings, vault_dir):
    from vaultexport.di.container import Container
    from vaultexport.services.config.ini_config_service import IniConfigService

    ini = tmp_path / "app.ini"
    ini.write_text("[render]\nmath_engine = katex\n", encoding="utf-8")
    c = Container(vault_dir, qsettings=qsettings, config=IniConfigService(explicit_path=ini))
    assert c.renderer.math_engine == "katex"


def test_vault_skips_export_folders(make_container, vault_dir):
    (vault_dir / "md").mkdir()
    (vault_dir / "md" / "alpha.md").write_text("converted", encoding="utf-8")
    c = make_container(vault_dir)
    assert [d.path for d in c.vault.list_documents()] == [
        "alpha.md",
        "beta.md",
        "notes/gamma.markdown",
    ]
