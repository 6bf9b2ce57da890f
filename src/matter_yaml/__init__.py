"""matter-yaml: parse and serialize YAML front matter"""

from matter_yaml.core.codec import parse, serialize, validate
from matter_yaml.core.errors import (
    ErrorKind,
    FrontMatterError,
    FrontMatterFormatError,
    FrontMatterTypeError,
    YamlParseError,
    YamlSerializeError,
)
from matter_yaml.core.models import DumpOptions, FrontMatter

__all__ = [
    "parse",
    "serialize",
    "validate",
    "FrontMatter",
    "DumpOptions",
    "ErrorKind",
    "FrontMatterError",
    "FrontMatterFormatError",
    "FrontMatterTypeError",
    "YamlParseError",
    "YamlSerializeError",
]
