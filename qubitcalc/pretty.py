"""Round and format floats for humans within a minimum and maximum width.

The formatter switches between plain and exponential notation as it sees
fit.  When the number cannot be shown within the limits, ``#`` characters
are printed instead.
"""

from __future__ import annotations

import math
from enum import Enum, auto

__all__ = ["pretty_float"]

_HASHES = "#" * 34


class _NumberClass(Enum):
    BIG = auto()
    MEDIUM = auto()
    SMALL = auto()
    ZERO = auto()
    SPECIAL = auto()
    UNPRINTABLE = auto()


def _classify(value: float) -> _NumberClass:
    if not math.isfinite(value):
        return _NumberClass.SPECIAL
    magnitude = abs(value)
    if magnitude == 0.0:
        return _NumberClass.ZERO
    if magnitude > 99999.0:
        return _NumberClass.BIG
    if magnitude < 0.001:
        return _NumberClass.SMALL
    return _NumberClass.MEDIUM


def _fixed(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def _exp(value: float, precision: int) -> str:
    """Exponential notation without a plus sign or padded exponent, e.g. ``1.2e8``."""
    mantissa, exponent = f"{value:.{precision}e}".split("e")
    return f"{mantissa}e{int(exponent)}"


def _display(value: float) -> str:
    """Shortest textual form of a non-finite or integral float."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(value)


def _medium(value: float, min_width: int, max_width: int) -> tuple[_NumberClass, str | None]:
    """Try plain notation; return the text, or the class to fall back to."""
    integer_probe = _fixed(value, 0)
    integer_length = len(integer_probe)

    if integer_length > max_width:
        return _NumberClass.BIG, None
    if integer_length + 1 >= max_width:
        if integer_probe != "0":
            return _NumberClass.MEDIUM, f"{value:>{min_width}.0f}"
        return _NumberClass.UNPRINTABLE, None

    precision = max_width - 1 - integer_length
    probe = _fixed(value, precision)
    leading_zeroes = 0
    digits = 0
    significant = False
    for char in probe:
        if char in ".-":
            continue
        digits += 1
        if char == "0":
            if not significant:
                leading_zeroes += 1
        else:
            significant = True
    if leading_zeroes * 100 // digits > 80:
        return _NumberClass.SMALL, None

    text = probe
    if integer_probe.startswith("1") and not text.startswith("1"):
        # The integer part was overestimated by rounding; one more digit fits.
        wider = _fixed(value, precision + 1)
        if len(wider) <= max_width:
            text = wider

    end = len(text)
    if "." in text:
        while end > min_width and end >= 3 and text[:end].endswith("0"):
            if text[: end - 1].endswith("."):
                break
            end -= 1
    return _NumberClass.MEDIUM, text[:end].rjust(min_width)


def _exponential(value: float, cls: _NumberClass, min_width: int, max_width: int) -> str | None:
    probe = _exp(value, 0)
    minimum = len(probe)
    if minimum > max_width:
        if cls is not _NumberClass.BIG:
            return "0".rjust(min_width)
        return None
    if minimum == max_width:
        return probe
    if minimum == max_width - 1:
        # No room for more precision: a '.' would be needed as well.
        return " " + probe

    probe2 = _exp(value, max_width - minimum - 1)
    if len(probe2) > max_width:
        minimum += len(probe2) - max_width
    zeroes_before_e = 0
    zeroes_in_a_row = 0
    for char in probe2:
        if char == "0":
            zeroes_in_a_row += 1
        elif char in "eE":
            zeroes_before_e = zeroes_in_a_row
        else:
            zeroes_in_a_row = 0
    to_chip = min(zeroes_before_e, max_width - min_width)
    return _exp(value, max_width - minimum - 1 - to_chip)


def pretty_float(value: float, min_width: int = 3, max_width: int = 12) -> str:
    """Format ``value`` using at least ``min_width`` and at most ``max_width`` characters."""
    if min_width == 0:
        min_width = 1
    if max_width == 0:
        return ""
    if min_width > max_width:
        max_width = min_width

    value = float(value)
    cls = _classify(value)

    if cls is _NumberClass.SPECIAL:
        text = _display(value)
        if len(text) <= max_width:
            return text.ljust(min_width)
        return "########"[:max_width]

    if cls is _NumberClass.ZERO:
        if max_width < 3 or min_width < 3:
            return "0".ljust(min_width)
        return _fixed(0.0, min_width - 2)

    if cls is _NumberClass.MEDIUM:
        cls, text = _medium(value, min_width, max_width)
        if text is not None:
            return text

    if cls in (_NumberClass.BIG, _NumberClass.SMALL):
        text = _exponential(value, cls, min_width, max_width)
        if text is not None:
            return text

    return _HASHES[:min_width]