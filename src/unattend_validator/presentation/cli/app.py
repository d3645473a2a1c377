"""Thin CLI wrapper: Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from unattend_validator.presentation.cli.formatters import (
    console,
    error_message,
    findings_tables,
    json_panel,
    result_json,
    rules_table,
    success_panel,
    summary_panel,
)

app = typer.Typer(
    name="unattend-validator",
    help="🪟 Validate Windows unattend.xml answer files before deployment",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage validator configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


# ---------------------------------------------------------------------------
# unattend-validator validate
# ---------------------------------------------------------------------------


@app.command()
def validate(
    source: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="unattend.xml file to validate"),
    ],
    detailed: Annotated[
        bool, typer.Option("--detailed", "-d", help="List every finding individually")
    ] = False,
    report: Annotated[
        Optional[Path], typer.Option("--report", "-r", help="Report file to write")
    ] = None,
    schema: Annotated[
        Optional[Path],
        typer.Option("--schema", exists=True, dir_okay=False, help="XSD to validate against"),
    ] = None,
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON instead of tables")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Validate an unattend.xml file. Exits 1 when any error is found."""
    from unattend_validator.bootstrap import Container
    from unattend_validator.domain.errors import (
        ConfigurationError,
        ReportWriteError,
    )

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        container = Container(config_path=config)
    except (FileNotFoundError, ConfigurationError) as e:
        error_message(str(e))
        raise typer.Exit(code=2)

    try:
        result, report_path = container.validate_unattend().execute(source, report, schema)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=2)
    except ReportWriteError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if as_json:
        result_json(result)
    else:
        summary_panel(result, report_path)
        if detailed or container.config.console.detailed:
            findings_tables(result)

    raise typer.Exit(code=0 if result.overall_valid else 1)


# ---------------------------------------------------------------------------
# unattend-validator rules
# ---------------------------------------------------------------------------


@app.command()
def rules() -> None:
    """Show the validation checklist."""
    from unattend_validator.rules.constants import RULE_CHECKLIST

    rules_table(RULE_CHECKLIST)


# ---------------------------------------------------------------------------
# unattend-validator config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
) -> None:
    """Show the active configuration."""
    from unattend_validator.config import get_config, load_config
    from unattend_validator.domain.errors import ConfigurationError

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except (FileNotFoundError, ConfigurationError) as e:
        error_message(str(e))
        raise typer.Exit(code=2)

    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "unattend_validator.json",
) -> None:
    """Copy the default configuration to the current directory for editing."""
    from unattend_validator.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit it and pass it with [bold]--config[/]:\n"
        f'  unattend-validator validate unattend.xml --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a JSON configuration file."""
    from unattend_validator.config import load_config
    from unattend_validator.domain.errors import ConfigurationError

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{escape(str(e))}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Report file: [cyan]{cfg.report.default_filename}[/]\n"
        f"  Detailed console: [cyan]{cfg.console.detailed}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
