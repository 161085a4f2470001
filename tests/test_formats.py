import pytest

from vaultexport.domain.errors import UnknownFormatError
from vaultexport.domain.formats import (
    HTML,
    MAP,
    OUTPUT_FORMATS,
    format_names,
    get_format,
    is_supported_input,
)


def test_every_format_declares_its_tool_needs():
    for fmt in OUTPUT_FORMATS:
        assert isinstance(fmt.needs_converter, bool)
        assert isinstance(fmt.needs_typesetting, bool)
        assert fmt.extension.startswith(".")
        if fmt.needs_typesetting:
            assert fmt.needs_converter


def test_html_and_map_stay_in_process():
    assert not HTML.needs_converter and not MAP.needs_converter
    assert get_format("pdf").needs_typesetting
    assert get_format("docx").needs_converter
    assert not get_format("docx").needs_typesetting


def test_format_names_are_unique():
    names = format_names()
    assert len(names) == len(set(names))


def test_get_format_accepts_instances():
    assert get_format(HTML) is HTML
    assert get_format("html") is HTML


def test_unknown_format_is_rejected():
    with pytest.raises(UnknownFormatError) as ei:
        get_format("wordperfect")
    assert isinstance(ei.value, ValueError)
    assert "wordperfect" in str(ei.value)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/vault/a.md", True),
        ("/vault/A.MD", True),
        ("/vault/b.markdown", True),
        ("/vault/c.txt", False),
        ("/vault/cmd", False),
        ("/vault/image.png", False),
    ],
)
def test_supported_inputs(path, expected):
    assert is_supported_input(path) is expected
