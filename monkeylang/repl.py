"""Interactive loop that prints the tokens of each input line."""

from __future__ import annotations

from typing import TextIO

from monkeylang.lexer import Lexer

PROMPT = ">> "


def start(input_stream: TextIO, output_stream: TextIO) -> None:
    """Read lines from ``input_stream`` and write their tokens to ``output_stream``."""
    for line in input_stream:
        output_stream.write(PROMPT)
        line = line.removesuffix("\n").removesuffix("\r")
        for tok in Lexer(line):
            output_stream.write(f"{{Type:{tok.type} Literal:{tok.literal}}}\n")
    output_stream.write(PROMPT)