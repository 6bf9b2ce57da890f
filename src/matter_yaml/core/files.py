"""Document discovery and front matter file I/O"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from matter_yaml.core.codec import parse, serialize
from matter_yaml.core.models import DumpOptions, FrontMatter
from matter_yaml.core.utils.logging import get_logger


MD_EXTENSIONS = {'.md', '.mdx', '.markdown'}

logger = get_logger(__name__)


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS and p.is_file())


def read_file(path: Path) -> FrontMatter:
    """Read a UTF-8 document and parse its front matter."""
    logger.debug("reading %s", path)
    return parse(path.read_text(encoding='utf-8'))


def write_file(
    path: Path,
    data: Any,
    content: str,
    options: Mapping[str, Any] | DumpOptions | None = None,
    ) -> Path:
    """Serialize data + content and write it to path, creating parent dirs."""
    text = serialize(data, content, options)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    logger.debug("wrote %s (%d chars)", path, len(text))
    return path
