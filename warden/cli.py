"""
Warden CLI
===========

Click-based command-line interface for Warden. Provides subcommands for
strength analysis, crack-time projection, risk assessment, the narrative
security report and strong-password generation.

Usage::

    python -m warden analyze
    python -m warden analyze "Tr0ub4dor&3"
    python -m warden crack-time --profile gpu --profile farm
    python -m warden risk -o json
    python -m warden report --output-file report.json -o json
    python -m warden generate --length 20

When PASSWORD is omitted it is read from a hidden prompt, which keeps it
out of shell history and the process list.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from shared.config import WardenConfig
from shared.console import WardenConsole
from shared.models import ScanResult

from warden import __version__
from warden.analyzers.crack_time import PROFILE_KEYS
from warden.analyzers.generator import MAX_LENGTH, MIN_LENGTH, RandomSourceUnavailableError
from warden.core.engine import WardenEngine
from warden.core.models import CrackProjection, PasswordAnalysis, RiskReport, SecurityReport
from warden.output.console import WardenConsoleOutput
from warden.output.report import WardenReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="warden")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Warden configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default from config, else console).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="No banner or status lines; JSON and errors still print.",
)
@click.option(
    "--corpus-common",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Common-password list (one per line) replacing the bundled one.",
)
@click.option(
    "--corpus-dictionary",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Dictionary word list (one per line) replacing the bundled one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    corpus_common: Optional[str],
    corpus_dictionary: Optional[str],
) -> None:
    """Warden -- Password Strength & Crack-Risk Analyzer.

    Estimate entropy, detect weakening patterns, project crack times,
    classify compromise risk and generate strong passwords.
    """
    ctx.ensure_object(dict)

    try:
        warden_config = WardenConfig.load(config)
    except (FileNotFoundError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="'--config'") from exc
    if corpus_common:
        warden_config.analyzer.common_passwords_path = corpus_common
    if corpus_dictionary:
        warden_config.analyzer.dictionary_words_path = corpus_dictionary

    output_format = output or warden_config.analyzer.output_format

    console = WardenConsole(quiet=quiet)
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["display"] = WardenConsoleOutput(console)
    ctx.obj["reporter"] = WardenReportGenerator()

    try:
        ctx.obj["engine"] = WardenEngine(warden_config)
    except FileNotFoundError as exc:
        console.error(str(exc))
        ctx.exit(1)

    if not quiet and output_format == "console":
        console.banner(version=warden_config.global_settings.version)


def _read_password(password: Optional[str]) -> str:
    if password is not None:
        return password
    return click.prompt("Password", hide_input=True, default="", show_default=False)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Emit *result* as JSON to stdout or to ``--output-file``."""
    reporter: WardenReportGenerator = ctx.obj["reporter"]
    console: WardenConsole = ctx.obj["console"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file))
        console.success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.render_json(result))


def _finish(ctx: click.Context, result: ScanResult, render) -> None:
    """Render *result* in the selected format.

    *render* draws the command-specific console view from the result
    metadata; it is skipped when the operation recorded an error.
    """
    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, result)
    else:
        if result.metadata:
            render(ctx.obj["display"], result.metadata)
        ctx.obj["display"].display_scan_result(result)
        if ctx.obj["output_file"]:
            _handle_output(ctx, result)

    if not result.metadata:
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.pass_context
def analyze(ctx: click.Context, password: Optional[str]) -> None:
    """Analyse password strength, entropy and patterns."""
    engine: WardenEngine = ctx.obj["engine"]
    result = engine.analyze_password(_read_password(password))

    def render(display: WardenConsoleOutput, meta: dict) -> None:
        display.display_analysis(PasswordAnalysis.model_validate(meta["analysis"]))

    _finish(ctx, result, render)


@cli.command("crack-time")
@click.argument("password", required=False)
@click.option(
    "--profile", "-p",
    "profiles",
    type=click.Choice(PROFILE_KEYS),
    multiple=True,
    help="Attacker profile to include (repeatable; default from config).",
)
@click.pass_context
def crack_time(ctx: click.Context, password: Optional[str], profiles: tuple[str, ...]) -> None:
    """Project crack times across attacker throughput profiles."""
    engine: WardenEngine = ctx.obj["engine"]
    result = engine.project_crack_time(_read_password(password), list(profiles) or None)

    def render(display: WardenConsoleOutput, meta: dict) -> None:
        display.display_projections(
            [CrackProjection.model_validate(p) for p in meta["projections"]],
            meta["effective_entropy_bits"],
        )

    _finish(ctx, result, render)


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def risk(ctx: click.Context, password: Optional[str]) -> None:
    """Numeric compromise risk from online and offline attackers."""
    engine: WardenEngine = ctx.obj["engine"]
    result = engine.assess_risk(_read_password(password))

    def render(display: WardenConsoleOutput, meta: dict) -> None:
        display.display_risk(RiskReport.model_validate(meta["risk"]))

    _finish(ctx, result, render)


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def report(ctx: click.Context, password: Optional[str]) -> None:
    """Narrative security report with recommendations."""
    engine: WardenEngine = ctx.obj["engine"]
    result = engine.security_report(_read_password(password))

    def render(display: WardenConsoleOutput, meta: dict) -> None:
        display.display_security_report(SecurityReport.model_validate(meta["report"]))

    _finish(ctx, result, render)


@cli.command()
@click.option(
    "--length", "-l",
    type=int,
    default=None,
    help="Requested length, clamped to 14-24 (default from config).",
)
@click.pass_context
def generate(ctx: click.Context, length: Optional[int]) -> None:
    """Generate a strong random password."""
    engine: WardenEngine = ctx.obj["engine"]
    console: WardenConsole = ctx.obj["console"]

    if length is not None and not MIN_LENGTH <= length <= MAX_LENGTH:
        console.warning(f"Length {length} clamped to the {MIN_LENGTH}-{MAX_LENGTH} range.")

    try:
        password = engine.generate_password(length)
    except RandomSourceUnavailableError as exc:
        console.error(str(exc))
        ctx.exit(2)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"password": password, "length": len(password)}))
    else:
        ctx.obj["display"].display_generated(password)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Warden CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
