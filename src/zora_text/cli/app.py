"""Typer CLI application for the name codec."""

import logging
import re
from typing import Annotated

try:
    import typer
    from rich.console import Console
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from zora_text.core.constants import ALPHABET, BASE_OFFSET, NULL_CHAR

NULL_GLYPH = "·"
HEX_BYTE = re.compile(r"[0-9A-Fa-f]{1,2}")


def parse_hex(text: str) -> bytes:
    """Parse hex bytes.

    Input separated by whitespace or commas is read one byte per token, each
    token 1-2 hex digits with an optional ``0x`` prefix. Input without
    separators is read as compact hex (``"D7DDB7"``).
    """
    tokens = [p[2:] if p.lower().startswith("0x") else p for p in text.replace(",", " ").split()]
    if len(tokens) == 1:
        return bytes.fromhex(tokens[0])

    result = bytearray()
    for tok in tokens:
        if not HEX_BYTE.fullmatch(tok):
            raise ValueError(f"not a hex byte: {tok!r}")
        result.append(int(tok, 16))
    return bytes(result)


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install zora-text[cli]")

    app = typer.Typer(
        name="zora-text",
        help="Encode and decode fixed-table Japanese name fields.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    @app.command()
    def encode(
        text: Annotated[str, typer.Argument(help="Text to encode")],
        sep: Annotated[str, typer.Option("--sep", help="Separator between hex bytes")] = " ",
    ) -> None:
        """Encode text and print the bytes as hex."""
        from zora_text.codec.japanese import encode as encode_text

        data = encode_text(text)
        print(sep.join(f"{b:02X}" for b in data))

    @app.command()
    def decode(
        hex_bytes: Annotated[str, typer.Argument(help="Hex bytes, e.g. 'D7 DD B7'")],
        show_null: Annotated[bool, typer.Option("--show-null", "-n", help=f"Show null characters as {NULL_GLYPH}")] = False,
    ) -> None:
        """Decode hex bytes and print the text."""
        from zora_text.codec.japanese import decode as decode_bytes

        try:
            data = parse_hex(hex_bytes)
        except ValueError as e:
            console.print(f"[red]Invalid hex input: {e}[/]")
            raise typer.Exit(1)

        text = decode_bytes(data)
        if show_null:
            text = text.replace(NULL_CHAR, NULL_GLYPH)
        else:
            text = text.replace(NULL_CHAR, "")
        print(text)

    @app.command()
    def table() -> None:
        """Print the character table as a 16-column grid."""
        grid = Table(title="zora-japanese", box=None, padding=(0, 1), collapse_padding=True)
        grid.add_column("", style="bold cyan")
        for col in range(16):
            grid.add_column(f"{col:X}", justify="center")

        for row_start in range(0, len(ALPHABET), 16):
            row = ALPHABET[row_start:row_start + 16]
            cells = [NULL_GLYPH if c == NULL_CHAR else c for c in row]
            grid.add_row(f"{row_start + BASE_OFFSET:02X}", *cells)

        console.print(grid)

    return app
