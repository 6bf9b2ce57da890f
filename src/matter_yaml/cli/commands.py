"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from matter_yaml.config import CONFIG_FILE, Settings, default_config_text, load_config
from matter_yaml.core.codec import serialize, validate
from matter_yaml.core.errors import FrontMatterError
from matter_yaml.core.files import discover_files, read_file, write_file
from matter_yaml.core.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def parse_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Document to parse")],
    content: Annotated[bool, typer.Option("--content/--no-content", help="Include the body in the output")] = True,
    ):
    """Print a document's front matter (and body) as JSON."""
    _settings()
    try:
        doc = read_file(path)
    except (FrontMatterError, UnicodeDecodeError) as e:
        _fail(f"{path}: {e}")
    out = {"data": doc.data}
    if content:
        out["content"] = doc.content
    typer.echo(json.dumps(out, indent=2, ensure_ascii=False, default=str))


def validate_cmd(
    paths: Annotated[list[Path], typer.Argument(exists=True, help="Files or directories to check")],
    ):
    """Check that each markdown file starts with a well-formed front matter block."""
    _settings()
    files = [f for p in paths for f in discover_files(p)]
    if not files:
        typer.echo("No markdown files found.")
        raise typer.Exit(1)

    invalid = 0
    for f in files:
        try:
            ok = validate(f.read_text(encoding='utf-8'))
        except UnicodeDecodeError as e:
            logger.debug("%s is not valid UTF-8: %s", f, e)
            ok = False
        typer.echo(f"  {'ok' if ok else 'invalid'}: {f}")
        invalid += not ok
    typer.echo(f"Validated {len(files)} file(s) - {len(files) - invalid} ok, {invalid} invalid")
    if invalid:
        raise typer.Exit(1)


def serialize_cmd(
    data_file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="YAML or JSON front matter data")],
    body_file: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, help="Document body")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write to this file instead of stdout")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="YAML indent width")] = None,
    width: Annotated[Optional[int], typer.Option("--width", help="Preferred YAML line width")] = None,
    sort_keys: Annotated[Optional[bool], typer.Option("--sort-keys/--no-sort-keys", help="Sort front matter keys")] = None,
    ):
    """Combine front matter data and a body into a single document."""
    settings = _settings(overrides={"indent": indent, "width": width, "sort_keys": sort_keys})
    try:
        data = yaml.safe_load(data_file.read_text(encoding='utf-8'))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        _fail(f"Invalid data file {data_file}", e)
    try:
        body = body_file.read_text(encoding='utf-8') if body_file else ""
    except UnicodeDecodeError as e:
        _fail(f"Invalid body file {body_file}", e)

    try:
        if out:
            write_file(out, data, body, settings.dump_options())
            logger.info("wrote %s", out)
            typer.echo(f"Wrote {out}")
        else:
            typer.echo(serialize(data, body, settings.dump_options()), nl=False)
    except FrontMatterError as e:
        _fail(str(e))


def init_cmd(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config file")] = False,
    ):
    """Write a default matter-yaml.yaml to the working directory."""
    target = Path(CONFIG_FILE)
    if target.exists() and not force:
        _fail(f"{CONFIG_FILE} already exists; use --force to overwrite")
    target.write_text(default_config_text(), encoding='utf-8')
    typer.echo(f"Config written to: {target}")
