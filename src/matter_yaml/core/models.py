"""Value types for the front matter codec"""

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class FrontMatter:
    """Decoded document: YAML metadata plus the body that follows it."""
    data:    Any                        # decoded YAML value; a dict for well-formed front matter
    content: str = field(default="")    # body after the closing delimiter, verbatim


class DumpOptions(BaseModel):
    """yaml.dump keyword arguments; unset fields fall back to the codec defaults."""
    model_config = ConfigDict(extra="forbid")

    indent:             Optional[int]  = Field(default=None, ge=2, le=9, description="Mapping indent width")
    width:              Optional[int]  = Field(default=None, ge=1, description="Preferred line width")
    sort_keys:          Optional[bool] = Field(default=None, description="Sort mapping keys")
    allow_unicode:      Optional[bool] = Field(default=None, description="Emit non-ASCII characters unescaped")
    default_flow_style: Optional[bool] = Field(default=None, description="True for flow style collections")
    explicit_end:       Optional[bool] = Field(default=None, description="Emit the '...' document end marker")
    line_break:         Optional[Literal["\r", "\n", "\r\n"]] = Field(default=None, description="Line break")
    canonical:          Optional[bool] = Field(default=None, description="Canonical YAML output")

    def as_kwargs(self) -> dict[str, Any]:
        """Return only the fields that were set, ready for yaml.dump."""
        return self.model_dump(exclude_none=True)
