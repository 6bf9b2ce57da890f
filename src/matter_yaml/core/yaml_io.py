"""PyYAML adapters: safe decoding and block-style encoding"""

from collections.abc import Mapping
from typing import Any

import yaml

from matter_yaml.core.models import DumpOptions


class BlockDumper(yaml.SafeDumper):
    """SafeDumper that indents sequences under their parent key (``key:\\n  - item``)."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


DEFAULT_DUMP_OPTIONS: dict[str, Any] = {
    "Dumper": BlockDumper,
    "indent": 2,
    "default_flow_style": False,
    "sort_keys": False,
    "allow_unicode": True,
}


RESERVED_DUMP_OPTIONS = frozenset({"stream", "encoding"})


def load(raw: str) -> Any:
    """Decode a YAML document with the safe loader; raises yaml.YAMLError."""
    return yaml.safe_load(raw)


def dump(value: Any, options: Mapping[str, Any] | DumpOptions | None = None) -> str:
    """Encode value as YAML, layering options over DEFAULT_DUMP_OPTIONS."""
    if isinstance(options, DumpOptions):
        options = options.as_kwargs()
    reserved = RESERVED_DUMP_OPTIONS.intersection(options or {})
    if reserved:
        # front matter is always rendered to an in-memory str
        raise TypeError(f"unsupported dump option(s): {', '.join(sorted(reserved))}")
    kwargs = {**DEFAULT_DUMP_OPTIONS, **(options or {})}
    return yaml.dump(value, **kwargs)
