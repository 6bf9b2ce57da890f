"""Error taxonomy for front matter parsing and serialization"""

from enum import Enum


class ErrorKind(str, Enum):
    invalid_type = "invalid_type"
    invalid_format = "invalid_format"
    yaml_parse = "yaml_parse"
    yaml_serialize = "yaml_serialize"


class FrontMatterError(Exception):
    """Base error: carries a kind tag and the human-readable message."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FrontMatterTypeError(FrontMatterError, TypeError):
    kind = ErrorKind.invalid_type

    @classmethod
    def expected(cls, fn: str, expected: str, value) -> "FrontMatterTypeError":
        """Build the standard '<fn> expected a <expected>' message for value."""
        article = "an" if expected[0] in "aeiou" else "a"
        return cls(f"{fn} expected {article} {expected}, but received {type(value).__name__}.")


class FrontMatterFormatError(FrontMatterError, ValueError):
    kind = ErrorKind.invalid_format

    def __init__(self, message: str = (
        'Invalid front matter format. Ensure the document starts with "---" and follows YAML syntax.'
    )):
        super().__init__(message)


class YamlParseError(FrontMatterError, ValueError):
    kind = ErrorKind.yaml_parse


class YamlSerializeError(FrontMatterError, ValueError):
    kind = ErrorKind.yaml_serialize
