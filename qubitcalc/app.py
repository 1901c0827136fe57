"""Line-by-line calculator front end: evaluates each line and keeps a running total."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .parser import Env, parse_with_env
from .pretty import pretty_float

__all__ = ["CalculationResult", "format_number", "process_input", "main"]


@dataclass(frozen=True)
class CalculationResult:
    """Formatted per-line results, one per line, and the sum of the normal values."""

    output: str = ""
    total: float = 0.0


def _is_normal(value: float) -> bool:
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def format_number(value: float) -> str:
    """Format a result for display; NaN is shown as ``-``."""
    if math.isnan(value):
        return "-"
    if math.isfinite(value) and value.is_integer():
        if value == 0.0:
            return "-0" if math.copysign(1.0, value) < 0 else "0"
        return str(int(value))
    return pretty_float(value).strip()


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def process_input(text: str) -> CalculationResult:
    """Evaluate every line of ``text`` in one shared environment."""
    env = Env()
    rendered = []
    total = 0.0
    for line in _lines(text):
        value = parse_with_env(line, env)
        if _is_normal(value):
            total += value
        rendered.append(format_number(value) + "\n")
    return CalculationResult(output="".join(rendered), total=total)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate the lines of the given files, or of standard input, and print the results."""
    parser = argparse.ArgumentParser(
        prog="qubit", description="Calculator & unit conversions"
    )
    parser.add_argument(
        "files", nargs="*", help="files to evaluate; standard input when none are given"
    )
    args = parser.parse_args(argv)

    if args.files:
        chunks = []
        for name in args.files:
            with open(name, encoding="utf-8") as handle:
                chunks.append(handle.read())
        text = "\n".join(chunk.rstrip("\n") for chunk in chunks)
    else:
        text = sys.stdin.read()

    result = process_input(text)
    sys.stdout.write(result.output)
    print(f"Total: {format_number(result.total)}")
    return 0