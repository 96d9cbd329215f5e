"""Click-based CLI for the vibe-css utility generator."""

import json
from contextlib import nullcontext
from pathlib import Path
from typing import Any

import click

from .. import __version__
from ..config import TokensLoader
from ..config.models import DesignTokens
from ..css_logging import LogCategory, debug_context, get_category_logger, setup_logging
from ..generator import UtilityGenerator
from ..stylesheet import StylesheetAssembler
from .errors import CLIError, ValidationError, handle_exception
from .output import OutputConfig, OutputManager

logger = get_category_logger(LogCategory.CLI)


def token_options(f: Any) -> Any:
    """Options that shape the design tokens."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="JSON design token file",
    )(f)
    f = click.option("--prefix", default=None, help="Namespace prefix (default: vibe)")(f)
    f = click.option(
        "--allow-unprefixed",
        is_flag=True,
        help="Also generate rules for class names without the prefix",
    )(f)
    return f


def _load_tokens(
    config_file: Path | None, prefix: str | None, allow_unprefixed: bool
) -> DesignTokens:
    return TokensLoader(config_file).load(
        prefix=prefix,
        allow_unprefixed_utilities=allow_unprefixed or None,
    )


def _fail(ctx: click.Context, error: Exception) -> None:
    output: OutputManager = ctx.obj["output"]
    message, exit_code = handle_exception(
        error, use_color=output.config.use_color, verbose=output.config.verbose
    )
    click.echo(message, err=True)
    ctx.exit(exit_code)


@click.group()
@click.version_option(version=__version__, prog_name="vibe-css")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write debug logs (JSON lines) to this file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    log_file: Path | None,
) -> None:
    """vibe-css - generate CSS rules from utility class names."""
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file, log_format="json")
    ctx.ensure_object(dict)
    ctx.obj["output"] = OutputManager(
        OutputConfig.from_flags(verbose=verbose, quiet=quiet, no_color=no_color)
    )


@cli.command()
@click.argument("classes", nargs=-1)
@token_options
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write CSS to this file instead of stdout",
)
@click.option("--no-header", is_flag=True, help="Omit the generated-by comment")
@click.option("--stats", is_flag=True, help="Print recognized/unknown counts")
@click.pass_context
def generate(
    ctx: click.Context,
    classes: tuple[str, ...],
    config_file: Path | None,
    prefix: str | None,
    allow_unprefixed: bool,
    output_file: Path | None,
    no_header: bool,
    stats: bool,
) -> None:
    """Generate a stylesheet for CLASSES (or whitespace-separated stdin)."""
    output: OutputManager = ctx.obj["output"]
    try:
        tokens = _load_tokens(config_file, prefix, allow_unprefixed)
        if classes:
            class_names = [name for arg in classes for name in arg.split()]
        else:
            class_names = click.get_text_stream("stdin").read().split()
        if not class_names:
            raise ValidationError(
                "No class names given",
                suggestion="Pass class names as arguments or pipe them on stdin",
            )

        logger.debug(f"Generating stylesheet for {len(class_names)} class names")
        assembler = StylesheetAssembler(UtilityGenerator(tokens))
        assembler.add_many(class_names)
        sheet = assembler.build()
        css = sheet.render(header=not no_header)

        if output_file is not None:
            output_file.write_text(css, encoding="utf-8")
            output.success(f"Wrote {len(sheet.rules)} rules to {output_file}")
        else:
            click.echo(css, nl=False)

        if stats:
            counts = sheet.stats()
            output.summary(
                total=counts["total_classes"],
                recognized=counts["recognized"],
                unknown=counts["unknown"],
                rules=counts["rules"],
            )
            for name in sheet.unknown:
                output.warning(f"Unknown class: {name}")
    except (CLIError, OSError) as e:
        _fail(ctx, e)


@cli.command()
@click.argument("class_name")
@token_options
@click.option("--trace", is_flag=True, help="Show debug logs while generating this class")
@click.pass_context
def explain(
    ctx: click.Context,
    class_name: str,
    config_file: Path | None,
    prefix: str | None,
    allow_unprefixed: bool,
    trace: bool,
) -> None:
    """Show the rules generated for a single CLASS_NAME."""
    output: OutputManager = ctx.obj["output"]
    try:
        tokens = _load_tokens(config_file, prefix, allow_unprefixed)
    except CLIError as e:
        _fail(ctx, e)
        return

    with debug_context() if trace else nullcontext():
        rules = UtilityGenerator(tokens).generate(class_name)
    if not rules:
        output.error(f"'{class_name}' is not recognized")
        ctx.exit(1)

    for rule in rules:
        media = f"  media={rule.media_query}" if rule.media_query else ""
        output.plain(output.colorize(f"order={rule.order}{media}", "dim"), force=True)
        output.plain(rule.to_css(), force=True)


@cli.command()
@token_options
@click.pass_context
def tokens(
    ctx: click.Context,
    config_file: Path | None,
    prefix: str | None,
    allow_unprefixed: bool,
) -> None:
    """Print the effective design tokens as JSON."""
    try:
        design_tokens = _load_tokens(config_file, prefix, allow_unprefixed)
    except CLIError as e:
        _fail(ctx, e)
        return
    click.echo(json.dumps(design_tokens.to_dict(), indent=2))


def main() -> None:
    """Entry point for ``python -m vibe_css``."""
    cli(obj={})


if __name__ == "__main__":
    main()
