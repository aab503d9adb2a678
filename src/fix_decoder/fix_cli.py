"""Typer CLI entrypoint for fix-decoder."""

from __future__ import annotations

import json
import logging
import sys
from typing import Annotated, Optional

import typer

from fix_decoder.fix_decoder import DecoderConfig, decode
from fix_decoder.fix_message import DecodedMessage
from fix_decoder.fix_parser import (
    MISSING_EQUALS_EMPTY,
    MISSING_EQUALS_POLICIES,
    EmptyInputError,
    delimiter_label,
    parse_delimiter,
    resolve_delimiter,
    swap_delimiter,
)
from fix_decoder.fix_tags import FixVersion
from fix_decoder.fix_version import available_versions

app = typer.Typer(help="FIX message decoder", rich_markup_mode=None)

TABLE_HEADERS = ("Tag", "Name", "Value", "Decoded")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("fix_decoder").setLevel(level)


def _delimiter_option(value: Optional[str]) -> Optional[str]:
    try:
        return parse_delimiter(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _missing_equals_option(value: str) -> str:
    if value not in MISSING_EQUALS_POLICIES:
        raise typer.BadParameter(f"expected one of {', '.join(MISSING_EQUALS_POLICIES)}")
    return value


def _read_message(message: Optional[str]) -> str:
    if message is None or message == "-":
        return sys.stdin.read()
    return message


def render_table(decoded: DecodedMessage) -> str:
    rows = [TABLE_HEADERS] + [
        (f.tag, f.tag_name, f.value, f.decoded_value) for f in decoded.fields
    ]
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_HEADERS))]
    lines = [
        f"{decoded.msg_type_summary} ({decoded.version}, "
        f"delimiter: {delimiter_label(decoded.delimiter)})"
    ]
    for index, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
        if index == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)


@app.callback()
def cli_callback() -> None:
    """Decode FIX tag=value messages into readable fields."""


@app.command("decode")
def decode_command(
    message: Annotated[
        Optional[str],
        typer.Argument(help="Raw FIX message. Read from stdin when omitted or '-'."),
    ] = None,
    delimiter: Annotated[
        Optional[str],
        typer.Option(
            "--delimiter",
            "-d",
            envvar="FIX_DECODER_DELIMITER",
            callback=_delimiter_option,
            help="Field delimiter: 'pipe' or 'soh'. Inferred from the message when not given.",
        ),
    ] = None,
    on_missing_equals: Annotated[
        str,
        typer.Option(
            "--on-missing-equals",
            callback=_missing_equals_option,
            help="Segments without '=': 'empty' keeps them with an empty value, 'skip' drops them.",
        ),
    ] = MISSING_EQUALS_EMPTY,
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging on stderr.")] = False,
) -> None:
    """Decode one FIX message."""
    _configure_logging(verbose)
    config = DecoderConfig(delimiter=delimiter, on_missing_equals=on_missing_equals)

    try:
        decoded = decode(_read_message(message), config=config)
    except EmptyInputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(decoded.as_dict(), ensure_ascii=False, indent=2))
    else:
        typer.echo(render_table(decoded))


@app.command("swap")
def swap_command(
    message: Annotated[
        Optional[str],
        typer.Argument(help="Raw FIX message. Read from stdin when omitted or '-'."),
    ] = None,
    delimiter: Annotated[
        Optional[str],
        typer.Option(
            "--delimiter",
            "-d",
            envvar="FIX_DECODER_DELIMITER",
            callback=_delimiter_option,
            help="Delimiter currently used by the message. Inferred when not given.",
        ),
    ] = None,
) -> None:
    """Rewrite the message with the other delimiter (pipe <-> SOH)."""
    raw = _read_message(message).rstrip("\r\n")
    current = resolve_delimiter(raw, delimiter)
    _, swapped = swap_delimiter(raw, current)
    typer.echo(swapped)


@app.command("versions")
def versions_command() -> None:
    """List the protocol versions with a field dictionary."""
    for version in available_versions():
        suffix = " (default)" if version == FixVersion.DEFAULT else ""
        typer.echo(f"{version}{suffix}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
