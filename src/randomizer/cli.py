import logging
import random
from pathlib import Path
from typing import Annotated, Any

import srsly
import typer
from pydantic import ValidationError

from randomizer.block import RandomBlock
from randomizer.charset import AnyText, Charset, FixedBytes, TextSet
from randomizer.engine import LengthPolicy, Randomizer
from randomizer.errors import InvalidEncodingError, RandomizerError
from randomizer.presets import PRESETS, get_preset, get_preset_names
from randomizer.trace import GenerationTrace, TraceStep

app = typer.Typer(help="Generate random text and bytes from a charset.")

_FORMATS = ("text", "hex", "json")


def _parse_words(value: str) -> TextSet:
    """Parse 'foo,bar' into a TextSet. Raises typer.BadParameter if empty."""
    words = [word for word in value.split(",") if word]
    if not words:
        raise typer.BadParameter(
            f"Invalid words '{value}': expected 'WORD,WORD' (e.g., 'foo,bar')"
        )
    return TextSet(items=tuple(words))


def _parse_hex_bytes(value: str) -> FixedBytes:
    try:
        return FixedBytes(data=bytes.fromhex(value))
    except ValueError as err:
        raise typer.BadParameter(
            f"Invalid hex bytes '{value}': expected hex digits (e.g., '00ff7f')"
        ) from err


def _resolve_charset(
    charset: str | None,
    words: str | None,
    hex_bytes: str | None,
    any_text: bool,
) -> Charset | str | None:
    chosen = [
        name
        for name, given in (
            ("--charset", charset is not None),
            ("--words", words is not None),
            ("--hex-bytes", hex_bytes is not None),
            ("--any-text", any_text),
        )
        if given
    ]
    if len(chosen) > 1:
        raise typer.BadParameter(
            f"Charset options are mutually exclusive, got {', '.join(chosen)}"
        )
    if words is not None:
        return _parse_words(words)
    if hex_bytes is not None:
        return _parse_hex_bytes(hex_bytes)
    if any_text:
        return AnyText()
    return charset


def _block_record(
    block: RandomBlock,
    randomizer: Randomizer,
    steps: list[TraceStep] | None = None,
) -> dict[str, Any]:
    try:
        text: str | None = block.to_text()
    except InvalidEncodingError:
        text = None
    record: dict[str, Any] = {
        "length": randomizer.length,
        "limit_mode": randomizer.limit_mode.value,
        "hex": block.to_bytes().hex(),
        "text": text,
        "byte_length": len(block),
    }
    if steps is not None:
        trace = GenerationTrace(
            policy=randomizer.limit_mode.value, steps=steps
        )
        record["trace"] = trace.model_dump()
    return record


@app.command()
def generate(
    length: Annotated[
        int, typer.Option("--length", "-n", help="Target length", min=0)
    ],
    charset: Annotated[
        str | None,
        typer.Option("--charset", "-c", help="Characters to sample from"),
    ] = None,
    words: Annotated[
        str | None,
        typer.Option("--words", "-w", help="Words to sample (comma-separated)"),
    ] = None,
    hex_bytes: Annotated[
        str | None,
        typer.Option("--hex-bytes", help="Bytes to sample, as hex digits"),
    ] = None,
    any_text: Annotated[
        bool,
        typer.Option("--any-text", help="Sample from the built-in alphabet"),
    ] = False,
    preset: Annotated[
        str | None,
        typer.Option(
            "--preset",
            "-p",
            help=f"Named preset: {', '.join(get_preset_names())}",
        ),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Separator between tokens"),
    ] = None,
    limit_mode: Annotated[
        LengthPolicy,
        typer.Option(
            "--limit-mode", "-m", help="Length policy: bytes, characters, steps"
        ),
    ] = LengthPolicy.STEPS,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed")
    ] = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output: text, hex, json")
    ] = "text",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write a JSON record to a file"),
    ] = None,
    trace: Annotated[
        bool,
        typer.Option(
            "--trace", help="Add the sampling trace to the JSON record"
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate one random block and print it."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if output_format not in _FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. Valid: {list(_FORMATS)}",
            err=True,
        )
        raise typer.Exit(1)
    if trace and output is None and output_format != "json":
        typer.echo(
            "Error: --trace requires --format json or --output", err=True
        )
        raise typer.Exit(1)

    resolved = _resolve_charset(charset, words, hex_bytes, any_text)
    try:
        if preset is not None:
            if resolved is not None:
                raise typer.BadParameter(
                    "--preset cannot be combined with a charset option"
                )
            randomizer = get_preset(preset, length)
        else:
            randomizer = Randomizer.new(length, resolved)
        randomizer = randomizer.with_separator(separator).with_limit_mode(
            limit_mode
        )
    except (ValueError, ValidationError) as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    rng = random.Random(seed)
    steps: list[TraceStep] | None = [] if trace else None
    try:
        block = randomizer.generate(rng, trace=steps)
    except RandomizerError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    record = _block_record(block, randomizer, steps)
    if output is not None:
        srsly.write_json(output, record)
        typer.echo(f"Wrote {record['byte_length']} bytes to {output}")
        return

    match output_format:
        case "json":
            typer.echo(srsly.json_dumps(record))
        case "hex":
            typer.echo(record["hex"])
        case _:
            if record["text"] is None:
                typer.echo(
                    "Error: output is not valid UTF-8; use --format hex",
                    err=True,
                )
                raise typer.Exit(1)
            typer.echo(record["text"])


@app.command()
def presets() -> None:
    """List named presets and their alphabet sizes."""
    for name in get_preset_names():
        randomizer = PRESETS[name](0)
        size = len(randomizer.charset.text)
        typer.echo(f"{name}\t{size}")


if __name__ == "__main__":
    app()
