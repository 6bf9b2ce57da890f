"""Front matter codec: parse, serialize, and validate YAML-headed documents"""

from collections.abc import Mapping
from typing import Any

import yaml

from matter_yaml.core import yaml_io
from matter_yaml.core.errors import (
    FrontMatterError,
    FrontMatterFormatError,
    FrontMatterTypeError,
    YamlParseError,
    YamlSerializeError,
)
from matter_yaml.core.grammar import DELIMITER, split_document
from matter_yaml.core.models import DumpOptions, FrontMatter
from matter_yaml.core.utils.logging import get_logger


logger = get_logger(__name__)

# Values the loose "object" check rejects for serialize(), alongside None and
# callables; bool is an int subclass.
PRIMITIVE_TYPES = (str, bytes, int, float, complex)


def parse(text: str) -> FrontMatter:
    """Split text into decoded front matter data and body content.

    Raises FrontMatterTypeError for non-string input, FrontMatterFormatError
    when the delimiters are missing or malformed, and YamlParseError when the
    block between them is not valid YAML.
    """
    if not isinstance(text, str):
        raise FrontMatterTypeError.expected("parse", "string", text)

    parts = split_document(text)
    if parts is None:
        raise FrontMatterFormatError()
    raw, body = parts

    try:
        data = yaml_io.load(raw)
    except (yaml.YAMLError, ValueError, RecursionError) as e:
        # ValueError: out-of-range implicit timestamps such as 2024-13-45
        raise YamlParseError(f"YAML Parsing Error: {e}") from e

    logger.debug("parsed front matter: %d yaml chars, %d body chars", len(raw), len(body))
    return FrontMatter(data=data, content=body)


def serialize(
    data: Any,
    content: str,
    options: Mapping[str, Any] | DumpOptions | None = None,
    ) -> str:
    """Render data as a YAML front matter block followed by content.

    Any non-None, non-primitive data passes the type check (mappings,
    sequences, dates); options are layered over the block-style defaults and
    handed to yaml.dump unchanged. No newline is appended after content.
    """
    if data is None or isinstance(data, PRIMITIVE_TYPES) or callable(data):
        raise FrontMatterTypeError.expected("serialize", "object", data)
    if not isinstance(content, str):
        raise FrontMatterTypeError.expected("serialize", "string", content)

    try:
        header = yaml_io.dump(data, options).strip()
    except (yaml.YAMLError, TypeError) as e:
        raise YamlSerializeError(f"YAML Serialization Error: {e}") from e

    return f"{DELIMITER}\n{header}\n{DELIMITER}\n{content}"


def validate(text: Any) -> bool:
    """Return True when text would parse without error; never raises."""
    try:
        parse(text)
    except FrontMatterError as e:
        logger.debug("front matter rejected (%s): %s", e.kind.value, e)
        return False
    return True
