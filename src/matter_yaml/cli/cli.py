"""CLI entrypoint: Typer app definition and command registration"""

import typer

from matter_yaml.cli.commands import init_cmd, parse_cmd, serialize_cmd, validate_cmd


app = typer.Typer(name="matter-yaml", no_args_is_help=True, help="YAML front matter parser and serializer")

app.command(name="parse")(parse_cmd)
app.command(name="validate")(validate_cmd)
app.command(name="serialize")(serialize_cmd)
app.command(name="init")(init_cmd)
