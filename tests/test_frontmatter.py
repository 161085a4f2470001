from vaultexport.utils.frontmatter import parse_frontmatter


def test_parses_mapping_and_strips_block():
    meta, body = parse_frontmatter("---\ntitle: Hello\ntags: [a, b]\n---\n# Body\n")
    assert meta == {"title": "Hello", "tags": ["a", "b"]}
    assert body == "# Body\n"


def test_no_frontmatter():
    meta, body = parse_frontmatter("# Just text\n")
    assert meta == {}
    assert body == "# Just text\n"


def test_invalid_yaml_keeps_content():
    text = "---\ntitle: [unclosed\n---\nbody"
    meta, body = parse_frontmatter(text)
    assert meta == {}
    assert body == text


def test_non_mapping_yaml_is_ignored():
    text = "---\n- a\n- b\n---\nbody"
    assert parse_frontmatter(text) == ({}, text)


def test_horizontal_rule_only_is_not_frontmatter():
    text = "---\n\nparagraph"
    assert parse_frontmatter(text) == ({}, text)
