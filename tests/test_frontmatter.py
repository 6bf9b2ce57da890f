from matter_yaml import parse, serialize, validate

def test_parse_frontmatter_yaml():
    text = """---
title: Hello
tags:
  - a
  - b
---
# Heading
Body
"""
    parsed = parse(text)
    assert parsed.data["title"] == "Hello"
    assert parsed.data["tags"] == ["a", "b"]
    assert parsed.content == "# Heading\nBody\n"


def test_serialize_then_parse():
    text = serialize({"title": "Hello", "tags": ["a", "b"]}, "# Heading\n")
    assert validate(text)
    parsed = parse(text)
    assert parsed.data == {"title": "Hello", "tags": ["a", "b"]}
    assert parsed.content == "# Heading\n"
