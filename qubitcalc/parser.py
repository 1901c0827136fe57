"""Line calculator: arithmetic, variables, one-argument functions and unit conversions."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from .units import (
    Acceleration,
    Angle,
    Area,
    DigitalInformation,
    Length,
    Mass,
    Speed,
    Temperature,
    Time,
    convert,
)

__all__ = ["FunctionDef", "Env", "parse_with_env", "parse"]

_MAX_DEPTH = 64
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass
class FunctionDef:
    """A user-defined function of one parameter, kept as source text."""

    param: str
    body: str


@dataclass
class Env:
    """Variables and user functions shared between lines."""

    vars: dict[str, float] = field(default_factory=dict)
    funcs: dict[str, FunctionDef] = field(default_factory=dict)


class _SyntaxError(Exception):
    pass


_UNIT_ALIASES = {
    Temperature.KELVIN: ("kelvin", "k"),
    Temperature.CELSIUS: ("celsius", "c"),
    Temperature.FAHRENHEIT: ("fahrenheit", "f"),
    Acceleration.METRE_PER_SECOND_SQUARED: ("m/s2", "mps2"),
    Angle.TURN: ("turns", "turn"),
    Angle.RADIAN: ("radians", "radian", "rad"),
    Angle.DEGREE: ("degrees", "degree", "deg"),
    Angle.GRADIAN: ("gradians", "gradian", "grad"),
    Length.MILLIMETRE: ("millimeters", "millimeter", "millimetres", "millimetre", "mm"),
    Length.CENTIMETRE: ("centimeters", "centimeter", "centimetres", "centimetre", "cm"),
    Length.METRE: ("meters", "meter", "metres", "metre", "m"),
    Length.KILOMETRE: ("kilometers", "kilometer", "kilometres", "kilometre", "km"),
    Length.INCH: ("inches", "inch", "in"),
    Length.FOOT: ("foot", "feet", "ft"),
    Length.YARD: ("yards", "yard", "yd"),
    Length.MILE: ("miles", "mile", "mi"),
    Length.NAUTICAL_MILE: ("nautical miles", "nautical mile", "mni", "nmi"),
    Mass.MICROGRAM: ("micrograms", "microgram", "microgrammes", "microgramme",
                     "mcg", "\u03bcg", "\u00b5g"),
    Mass.MILLIGRAM: ("milligrams", "milligram", "mg"),
    Mass.GRAM: ("grams", "gram", "g"),
    Mass.KILOGRAM: ("kilograms", "kilogram", "kilo", "kg"),
    Mass.METRIC_TON: ("metric tons", "metric ton", "tonnes", "tonne", "tons", "ton", "t"),
    Mass.OUNCE: ("ounces", "ounce", "oz"),
    Mass.POUND: ("pounds", "pound", "lbs", "lb"),
    Mass.STONE: ("stones", "stone", "st"),
    Mass.SHORT_TON: ("short tons", "short ton"),
    Mass.LONG_TON: ("long tons", "long ton"),
    Time.NANOSECOND: ("nanoseconds", "nanosecond", "nanosecs", "nanosec", "ns"),
    Time.MICROSECOND: ("microseconds", "microsecond", "microsecs", "microsec",
                       "\u00b5s", "\u03bcs"),
    Time.MILLISECOND: ("milliseconds", "millisecond", "millisecs", "millisec", "ms"),
    Time.SECOND: ("seconds", "second", "secs", "sec", "s"),
    Time.MINUTE: ("minutes", "minute", "mins", "min"),
    Time.HOUR: ("hours", "hour", "hrs", "hr", "h"),
    Time.DAY: ("days", "day", "d"),
    Time.WEEK: ("weeks", "week", "wks", "wk"),
    Time.MONTH: ("months", "month", "mos", "mo"),
    Time.YEAR: ("years", "year", "yrs", "yr", "y"),
    Time.DECADE: ("decades", "decade"),
    Time.CENTURY: ("centuries", "century", "centry"),
    Time.MILLENIUM: ("milleniums", "millenium", "millennia", "millenia", "millennium"),
    Area.SQUARE_METRE: ("metres2", "metre2", "meters2", "meter2", "sqm", "m2"),
    Area.HECTARE: ("hectares", "hectare", "ha"),
    Area.SQUARE_KILOMETRE: ("kilometres2", "kilometre2", "kilometers2", "kilometer2",
                            "sqkm", "km2"),
    Area.SQUARE_INCH: ("inches2", "inch2", "sqin", "in2"),
    Area.SQUARE_FEET: ("feet2", "foot2", "sqft", "ft2"),
    Area.SQUARE_YARD: ("yards2", "yard2", "sqyd", "yd2"),
    Area.ACRE: ("acres", "acre", "ac"),
    Area.SQUARE_MILE: ("miles2", "mile2", "sqmi", "mi2"),
    Speed.METRE_PER_SECOND: ("mps",),
    Speed.KILOMETRES_PER_HOUR: ("kph", "kmh"),
    Speed.FEET_PER_SECOND: ("fps",),
    Speed.MILES_PER_HOUR: ("mph",),
    Speed.KNOT: ("knots", "knot", "kn", "kt"),
    DigitalInformation.BIT: ("bits", "bit"),
    DigitalInformation.BYTE: ("bytes", "byte"),
    DigitalInformation.KILOBIT: ("kilobits", "kilobit", "kbit"),
    DigitalInformation.KILOBYTE: ("kilobytes", "kilobyte", "kb"),
    DigitalInformation.MEGABIT: ("megabits", "megabit", "mbit"),
    DigitalInformation.MEGABYTE: ("megabytes", "megabyte", "mb"),
    DigitalInformation.GIGABIT: ("gigabits", "gigabit", "gbit"),
    DigitalInformation.GIGABYTE: ("gigabytes", "gigabyte", "gb"),
    DigitalInformation.TERABIT: ("terabits", "terabit", "tbit"),
    DigitalInformation.TERABYTE: ("terabytes", "terabyte", "tb"),
    DigitalInformation.PETABIT: ("petabits", "petabit", "pbit"),
    DigitalInformation.PETABYTE: ("petabytes", "petabyte", "pb"),
}

_ALIASES = sorted(
    ((alias, unit) for unit, aliases in _UNIT_ALIASES.items() for alias in aliases),
    key=lambda item: len(item[0]),
    reverse=True,
)

_CONVERT_WORDS = ("to", "in")

# (spelling, operator name); symbolic spellings listed longest first.
_OPERATORS = (
    ("% of", "percent_of"),
    ("% on", "percent_on"),
    (">>", "right_shift"),
    ("<<", "left_shift"),
    ("+", "add"),
    ("-", "subtract"),
    ("*", "multiply"),
    ("/", "divide"),
    ("%", "modulus"),
    ("^", "power"),
    ("multiply by", "multiply"),
    ("divide by", "divide"),
    ("percent of", "percent_of"),
    ("percent on", "percent_on"),
    ("without", "subtract"),
    ("subtract", "subtract"),
    ("minus", "subtract"),
    ("with", "add"),
    ("plus", "add"),
    ("add", "add"),
    ("times", "multiply"),
    ("mul", "multiply"),
    ("div", "divide"),
    ("mod", "modulus"),
)

# operator name -> (binding power, right associative)
_BINDING = {
    "add": (1, False),
    "subtract": (1, False),
    "multiply": (2, False),
    "divide": (2, False),
    "modulus": (3, False),
    "power": (4, True),
    "percent_of": (5, False),
    "percent_on": (5, False),
    "right_shift": (6, True),
    "left_shift": (6, True),
}

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_FUN_DEF = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*\(\s*([A-Za-z_][A-Za-z0-9_]*)\s*\)\s*=(?!=)(.*)", re.S)
_ASSIGN = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*=(?!=)(.*)", re.S)

_CONSTANTS = {"pi": math.pi, "e": math.e, "tau": math.tau}


def _to_i64(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I64_MAX:
        return _I64_MAX
    if value <= _I64_MIN:
        return _I64_MIN
    return int(value)


def _wrap_i64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def _power(lhs: float, rhs: float) -> float:
    try:
        return math.pow(lhs, rhs)
    except OverflowError:
        if lhs < 0 and float(rhs).is_integer() and int(rhs) % 2:
            return -math.inf
        return math.inf
    except ValueError:
        if lhs == 0.0 and rhs < 0:
            return math.inf
        return math.nan


def _modulus(lhs: float, rhs: float) -> float:
    try:
        return math.fmod(lhs, rhs)
    except ValueError:
        return math.nan


def _apply_infix(op: str, lhs: float, rhs: float) -> float:
    if op == "add":
        return lhs + rhs
    if op == "subtract":
        return lhs - rhs
    if op == "multiply":
        return lhs * rhs
    if op == "divide":
        return _divide(lhs, rhs)
    if op == "power":
        return _power(lhs, rhs)
    if op == "percent_of":
        return lhs / 100.0 * rhs
    if op == "percent_on":
        return lhs / 100.0 * rhs + rhs
    if op == "right_shift":
        return float(_to_i64(lhs) >> (_to_i64(rhs) & 63))
    if op == "left_shift":
        return float(_wrap_i64(_to_i64(lhs) << (_to_i64(rhs) & 63)))
    if op == "modulus":
        return _modulus(lhs, rhs)
    return math.nan


def _cbrt(x: float) -> float:
    if not math.isfinite(x) or x == 0.0:
        return x
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _round(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _log10(x: float) -> float:
    if x == 0.0:
        return -math.inf
    return math.log10(x)


def _atanh(x: float) -> float:
    if abs(x) == 1.0:
        return math.copysign(math.inf, x)
    return math.atanh(x)


_BUILTINS: dict[str, Callable[[float], float]] = {
    "sin": lambda x: math.sin(math.radians(x)),
    "cos": lambda x: math.cos(math.radians(x)),
    "tan": lambda x: math.tan(math.radians(x)),
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "asinh": math.asinh,
    "acosh": math.acosh,
    "atanh": _atanh,
    "log": _log10,
    "sqrt": math.sqrt,
    "cbrt": _cbrt,
    "round": _round,
    "ceil": lambda x: float(math.ceil(x)) if math.isfinite(x) else x,
    "floor": lambda x: float(math.floor(x)) if math.isfinite(x) else x,
}


def _apply_builtin(name: str, arg: float) -> float:
    func = _BUILTINS.get(name)
    if func is None:
        return math.nan
    if math.isnan(arg):
        return math.nan
    try:
        return func(arg)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.copysign(math.inf, arg) if name == "sinh" else math.inf


class _Evaluator:
    """Parses and evaluates one expression at a time."""

    def __init__(self, text: str, env: Env, locals_: Optional[dict[str, float]], depth: int):
        self.text = text
        self.pos = 0
        self.env = env
        self.locals = locals_
        self.depth = depth

    def _skip(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _at_boundary(self, end: int) -> bool:
        return end >= len(self.text) or not self.text[end].isalnum()

    def _word(self, word: str) -> bool:
        end = self.pos + len(word)
        if self.text[self.pos:end].lower() == word and self._at_boundary(end):
            self.pos = end
            return True
        return False

    def _unit(self):
        for alias, unit in _ALIASES:
            end = self.pos + len(alias)
            if self.text[self.pos:end].lower() == alias and self._at_boundary(end):
                self.pos = end
                return unit
        return None

    def parse_all(self) -> float:
        value = self.expression(0)
        self._skip()
        if self.pos != len(self.text):
            raise _SyntaxError(f"unexpected input at {self.pos}")
        return value

    def _operator(self) -> Optional[tuple[str, int]]:
        for spelling, name in _OPERATORS:
            end = self.pos + len(spelling)
            if self.text[self.pos:end].lower() != spelling:
                continue
            if spelling[-1].isalpha() and not self._at_boundary(end):
                continue
            return name, end
        return None

    def expression(self, min_bp: int) -> float:
        lhs = self.primary()
        while True:
            self._skip()
            found = self._operator()
            if found is None:
                break
            name, end = found
            bp, right = _BINDING[name]
            if bp < min_bp:
                break
            self.pos = end
            rhs = self.expression(bp if right else bp + 1)
            lhs = _apply_infix(name, lhs, rhs)
        return lhs

    def _conversion(self, number: float) -> Optional[float]:
        start = self.pos
        self._skip()
        source = self._unit()
        if source is not None:
            self._skip()
            if any(self._word(word) for word in _CONVERT_WORDS):
                self._skip()
                target = self._unit()
                if target is not None:
                    return convert(number, source, target)
        self.pos = start
        return None

    def primary(self) -> float:
        self._skip()
        match = _NUMBER.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            number = float(match.group())
            converted = self._conversion(number)
            return number if converted is None else converted
        if self.pos >= len(self.text):
            raise _SyntaxError("unexpected end of input")
        char = self.text[self.pos]
        if char in "+-":
            self.pos += 1
            value = self.primary()
            return -value if char == "-" else value
        if char == "(":
            self.pos += 1
            value = self.expression(0)
            self._expect(")")
            return value
        match = _IDENT.match(self.text, self.pos)
        if not match:
            raise _SyntaxError(f"unexpected {char!r}")
        name = match.group()
        self.pos = match.end()
        after_name = self.pos
        self._skip()
        if self.pos < len(self.text) and self.text[self.pos] == "(":
            self.pos += 1
            arg = self.expression(0)
            self._expect(")")
            return self._call(name, arg)
        self.pos = after_name
        if name in _CONSTANTS:
            return _CONSTANTS[name]
        if self.locals is not None and name in self.locals:
            return self.locals[name]
        return self.env.vars.get(name, math.nan)

    def _expect(self, char: str) -> None:
        self._skip()
        if self.pos >= len(self.text) or self.text[self.pos] != char:
            raise _SyntaxError(f"expected {char!r}")
        self.pos += 1

    def _call(self, name: str, arg: float) -> float:
        definition = self.env.funcs.get(name)
        if definition is None:
            return _apply_builtin(name, arg)
        locals_ = dict(self.locals or {})
        locals_[definition.param] = arg
        return _evaluate(definition.body, self.env, locals_, self.depth + 1)


def _evaluate(text: str, env: Env, locals_: Optional[dict[str, float]], depth: int) -> float:
    if depth > _MAX_DEPTH:
        return math.nan
    try:
        return _Evaluator(text, env, locals_, depth).parse_all()
    except (_SyntaxError, RecursionError):
        return math.nan


def _is_expression(text: str) -> bool:
    try:
        _Evaluator(text, Env(), None, 0).parse_all()
    except _SyntaxError:
        return False
    return True


def parse_with_env(text: str, env: Env) -> float:
    """Evaluate one line, updating ``env`` for assignments and function definitions.

    Function definitions and lines that cannot be parsed give NaN.
    """
    match = _FUN_DEF.fullmatch(text)
    if match:
        name, param, body = match.groups()
        if not _is_expression(body):
            return math.nan
        env.funcs[name] = FunctionDef(param=param, body=body.strip())
        return math.nan
    match = _ASSIGN.fullmatch(text)
    if match:
        name, body = match.groups()
        if not _is_expression(body):
            return math.nan
        value = _evaluate(body, env, None, 0)
        env.vars[name] = value
        return value
    return _evaluate(text, env, None, 0)


def parse(text: str) -> float:
    """Evaluate one line in a fresh environment."""
    return parse_with_env(text, Env())