"""
Forge CLI
==========

Click-based command-line interface for SecretForge. Generates secrets,
rates caller-supplied secrets, reports string entropy and self-tests
the random source.

Usage::

    python -m forge random --length 20 --no-symbols
    python -m forge memorable --words 5
    python -m forge pin --digits 6
    python -m forge classify --mode PIN 8068
    python -m forge entropy "sweet"
    python -m forge self-test --samples 50000

Length bounds (6-256 characters, 3-12 words, 4-12 digits by default)
are enforced here, not in the engine.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

import click

from shared.config import ForgeConfig
from shared.console import ForgeConsole

from forge import __version__
from forge.analyzers.uniformity import UniformityTester
from forge.core.engine import ForgeEngine
from forge.core.errors import ForgeError
from forge.core.models import (
    MemorableOptions,
    Mode,
    PinOptions,
    RandomOptions,
    StrengthReport,
)
from forge.core.wordlist import WordList
from forge.output.console import ForgeConsoleOutput


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="secretforge")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a SecretForge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """SecretForge -- passwords, passphrases and PINs with strength scoring."""
    ctx.ensure_object(dict)

    forge_config = ForgeConfig.load(config)
    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output

    console = ForgeConsole()
    ctx.obj["console"] = console
    ctx.obj["display"] = ForgeConsoleOutput(console)
    ctx.obj["engine"] = ForgeEngine(forge_config)

    if not quiet and output == "console":
        console.banner(version=forge_config.global_settings.version)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _run(ctx: click.Context, action: Callable[[], Any]) -> Any:
    """Run *action*, turning engine errors into an error message and exit code 1."""
    try:
        return action()
    except ForgeError as exc:
        console: ForgeConsole = ctx.obj["console"]
        console.error(f"{type(exc).__name__}: {exc}")
        ctx.exit(1)


def _bounded(value: Optional[int], default: int, low: int, high: int, name: str) -> int:
    """Apply the caller-side bounds to a length option."""
    if value is None:
        return default
    if not low <= value <= high:
        raise click.BadParameter(
            f"{value} is not in the range {low}-{high}.", param_hint=name
        )
    return value


def _emit_secret(ctx: click.Context, secret: str, report: StrengthReport) -> None:
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            {"secret": secret, "report": report.model_dump(mode="json")},
            indent=2,
            ensure_ascii=False,
        ))
    else:
        display: ForgeConsoleOutput = ctx.obj["display"]
        display.display_secret(secret, report)


def _generate(ctx: click.Context, engine: ForgeEngine, mode: Mode, options: Any) -> None:
    secret, report = _run(ctx, lambda: engine.generate_with_report(mode, options))
    _emit_secret(ctx, secret, report)


# ===================================================================== #
#  Generation Subcommands
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Number of characters.")
@click.option("--numbers/--no-numbers", default=True, help="Include digits 0-9.")
@click.option("--symbols/--no-symbols", default=True, help="Include punctuation.")
@click.pass_context
def random(ctx: click.Context, length: Optional[int], numbers: bool, symbols: bool) -> None:
    """Generate a random password (lowercase letters, digits, symbols)."""
    gen = ctx.obj["config"].generator
    options = RandomOptions(
        length=_bounded(length, gen.default_length, gen.min_length, gen.max_length, "--length"),
        include_numbers=numbers,
        include_symbols=symbols,
    )
    _generate(ctx, ctx.obj["engine"], Mode.RANDOM, options)


@cli.command()
@click.option("--words", "-w", type=int, default=None, help="Number of words.")
@click.option(
    "--wordlist",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Word list file (one word per line) instead of the bundled list.",
)
@click.pass_context
def memorable(ctx: click.Context, words: Optional[int], wordlist: Optional[str]) -> None:
    """Generate a memorable passphrase of space-separated words."""
    config: ForgeConfig = ctx.obj["config"]
    gen = config.generator
    options = MemorableOptions(
        word_count=_bounded(
            words, gen.default_word_count, gen.min_word_count, gen.max_word_count, "--words"
        ),
    )
    engine: ForgeEngine = ctx.obj["engine"]
    if wordlist:
        custom = _run(ctx, lambda: WordList.from_file(wordlist))
        engine = ForgeEngine(config, wordlist=custom, logger=engine.logger)
        if ctx.obj["output_format"] == "console":
            ctx.obj["console"].info(f"Using word list {custom.source} ({len(custom)} words)")
    _generate(ctx, engine, Mode.MEMORABLE, options)


@cli.command()
@click.option("--digits", "-d", type=int, default=None, help="Number of digits.")
@click.pass_context
def pin(ctx: click.Context, digits: Optional[int]) -> None:
    """Generate a numeric PIN."""
    gen = ctx.obj["config"].generator
    options = PinOptions(
        digit_count=_bounded(
            digits, gen.default_digit_count, gen.min_digit_count, gen.max_digit_count, "--digits"
        ),
    )
    _generate(ctx, ctx.obj["engine"], Mode.PIN, options)


# ===================================================================== #
#  Analysis Subcommands
# ===================================================================== #

@cli.command()
@click.option(
    "--mode", "-m",
    type=click.Choice([m.value for m in Mode], case_sensitive=False),
    default=Mode.RANDOM.value,
    help="Classification scheme to apply.",
)
@click.argument("secret")
@click.pass_context
def classify(ctx: click.Context, mode: str, secret: str) -> None:
    """Rate the strength of SECRET."""
    engine: ForgeEngine = ctx.obj["engine"]
    report = _run(ctx, lambda: engine.assess(mode, secret))

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(report.model_dump(mode="json"), indent=2))
    else:
        display: ForgeConsoleOutput = ctx.obj["display"]
        display.display_report(report)


@cli.command()
@click.argument("text")
@click.pass_context
def entropy(ctx: click.Context, text: str) -> None:
    """Show the Shannon entropy of TEXT in bits per character."""
    engine: ForgeEngine = ctx.obj["engine"]
    shannon = engine.shannon_entropy(text)
    min_h = engine.scorer.min_entropy(text)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({
            "length": len(text),
            "distinct_symbols": len(set(text)),
            "shannon": shannon,
            "min_entropy": min_h,
            "total_bits": shannon * len(text),
        }, indent=2))
    else:
        display: ForgeConsoleOutput = ctx.obj["display"]
        display.display_entropy(text, shannon, min_h)


@cli.command("self-test")
@click.option(
    "--samples", "-n",
    type=click.IntRange(min=1),
    default=10_000,
    show_default=True,
    help="Draws per statistical test.",
)
@click.option(
    "--range", "range_size",
    type=click.IntRange(2, UniformityTester.MAX_RANGE_SIZE),
    default=None,
    help="Index range for the chi-squared test (default: full alphabet size).",
)
@click.pass_context
def self_test(ctx: click.Context, samples: int, range_size: Optional[int]) -> None:
    """Run statistical checks against the OS random source."""
    engine: ForgeEngine = ctx.obj["engine"]
    console: ForgeConsole = ctx.obj["console"]

    if ctx.obj["output_format"] == "json":
        result = _run(ctx, lambda: engine.check_source(samples, range_size))
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        with console.status("Sampling random source..."):
            result = _run(ctx, lambda: engine.check_source(samples, range_size))
        display: ForgeConsoleOutput = ctx.obj["display"]
        display.display_uniformity(result)
        if result.overall_pass:
            console.success("Random source passed the self-test")
        else:
            console.warning("Random source failed the self-test")

    if not result.overall_pass:
        ctx.exit(1)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the SecretForge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
