"""pmxl CLI entry point."""

import logging
import sys
from typing import Any, Callable, NoReturn

import click

from pmxl import __version__
from pmxl.csv_export import default_output_path, write_positions_csv
from pmxl.errors import Err, ParseOutcome
from pmxl.models import MusicXMLParseResult
from pmxl.parser import parse_musicxml_file

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Every reported error exits with 1, including click's own usage errors.
USAGE_ERROR_EXIT_CODE = 1


def _fail_usage(ctx: click.Context, message: str) -> NoReturn:
    """Report a usage error, show the top-level help and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    click.echo(ctx.find_root().get_help())
    sys.exit(USAGE_ERROR_EXIT_CODE)


def _require_file(file_path: str | None) -> str:
    if not file_path:
        _fail_usage(click.get_current_context(), "No MusicXML file specified")
    return file_path


def _unwrap(outcome: ParseOutcome) -> MusicXMLParseResult:
    """Return the parse result, or print the error message and exit with status 1."""
    if isinstance(outcome, Err):
        click.echo(f"Error: {outcome.error.message}", err=True)
        sys.exit(1)
    return outcome.value


# ── Shared options ────────────────────────────────────────────────────────────
# --version and --output are accepted before or after the command name.

def _version_flag() -> Callable[[Any], Any]:
    return click.version_option(
        __version__,
        "-v",
        "--version",
        prog_name="pmxl",
        message="Ponder MusicXML CLI v%(version)s",
    )


def _output_option(help_text: str) -> Callable[[Any], Any]:
    return click.option("--output", "-o", default=None, metavar="PATH", help=help_text)


class Command(click.Command):
    """Command whose usage errors exit with status 1 instead of click's 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = USAGE_ERROR_EXIT_CODE
            raise


class CommandGroup(Command, click.Group):
    """Group that reports unknown commands and usage errors with exit status 1."""

    command_class = Command

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            _fail_usage(ctx, f"Unknown command '{cmd_name}'")
        return super().resolve_command(ctx, args)


SUBCOMMAND_SETTINGS = {"allow_extra_args": True}


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(
    cls=CommandGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@_version_flag()
@_output_option("Destination CSV file path for the measures command.")
@click.option("--verbose", is_flag=True, help="Log parsing details to stderr.")
@click.pass_context
def main(ctx: click.Context, output: str | None, verbose: bool) -> None:
    """
    Ponder MusicXML CLI: inspect partwise MusicXML scores.

    \b
    Examples:
      pmxl version example.musicxml
      pmxl summary example.musicxml
      pmxl measures example.musicxml -o positions.csv
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["output"] = output

    if ctx.invoked_subcommand is None:
        _fail_usage(ctx, "No command specified")


# ── version subcommand ─────────────────────────────────────────────────────────

@main.command(context_settings=SUBCOMMAND_SETTINGS)
@click.argument("file_path", required=False, metavar="FILE")
@_version_flag()
@_output_option("Ignored by this command.")
def version(file_path: str | None, output: str | None) -> None:
    """Print the MusicXML version declared by FILE."""
    result = _unwrap(parse_musicxml_file(_require_file(file_path)))
    click.echo(f"MusicXML Version: {result.version.major}.{result.version.minor}")


# ── summary subcommand ─────────────────────────────────────────────────────────

@main.command(context_settings=SUBCOMMAND_SETTINGS)
@click.argument("file_path", required=False, metavar="FILE")
@_version_flag()
@_output_option("Ignored by this command.")
def summary(file_path: str | None, output: str | None) -> None:
    """Print title, composer, measure count and parts of FILE."""
    result = _unwrap(parse_musicxml_file(_require_file(file_path)))
    info = result.summary

    click.echo("MusicXML Summary:")
    click.echo("-----------------")
    click.echo(f"Title: {info.title or 'N/A'}")
    click.echo(f"Composer: {info.composer or 'N/A'}")
    click.echo(f"Opus: {info.opus or 'N/A'}")
    click.echo(f"Movement: {info.movement or 'N/A'}")
    click.echo(f"Measure Count: {info.measure_count}")

    click.echo()
    click.echo("Parts:")
    for part in info.parts:
        click.echo(f"- {part.display_name} ({part.id})")


# ── measures subcommand ────────────────────────────────────────────────────────

@main.command(context_settings=SUBCOMMAND_SETTINGS)
@click.argument("file_path", required=False, metavar="FILE")
@_version_flag()
@_output_option("Destination CSV file path. Defaults to <file-stem>_measures.csv.")
@click.pass_context
def measures(ctx: click.Context, file_path: str | None, output: str | None) -> None:
    """
    Export placeholder measure positions of FILE to CSV.

    \b
    Examples:
      pmxl measures score.musicxml
      pmxl measures score.musicxml -o positions.csv
      pmxl -o positions.csv measures score.musicxml
    """
    file_path = _require_file(file_path)
    result = _unwrap(parse_musicxml_file(file_path))

    if output is None:
        output = ctx.obj.get("output") if ctx.obj else None
    resolved_output = output if output is not None else default_output_path(file_path)
    logger.debug("Resolved CSV output path: %s", resolved_output)

    try:
        write_positions_csv(result.measure_positions, resolved_output)
    except OSError as exc:
        click.echo(f"Error: Could not write CSV file: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Measure positions exported to {resolved_output}")
