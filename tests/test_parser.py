import math

import pytest

from qubitcalc.parser import Env, FunctionDef, parse, parse_with_env


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2/(3/3)", 2.0),
        ("1 + 1e-12 - 1", 0.000000000001000088900582341),
        ("2^(3*4)", 4096.0),
        ("2*(3+4)", 14.0),
        ("2 - 2^3*2", -14.0),
        ("6*3/4*5", 22.5),
        ("2/3*4^2", 10.666666666666666),
        ("1+2/3*4+5", 8.666666666666666),
    ],
)
def test_precedence(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "expr", ["2+2", "2 + 2", "2 + +2", "2 + (+2)", "2 + (+1 +1)", "2 with 2", "2 plus 2", "2 add 2"]
)
def test_addition(expr):
    assert parse(expr) == 4.0


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2-2", 0.0), ("2 - 2", 0.0), ("2 - -2", 4.0), ("2 - (-2)", 4.0),
        ("2 - (-1 -1)", 4.0), ("2 without 2", 0.0), ("2 subtract 2", 0.0), ("2 minus 2", 0.0),
    ],
)
def test_subtraction(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize("expr", ["2 * 2", "2 times 2", "2 multiply by 2", "2 mul 2"])
def test_multiplication(expr):
    assert parse(expr) == 4.0


def test_variables():
    env = Env()
    assert parse_with_env("x=2", env) == 2.0
    assert parse_with_env("x+3", env) == 5.0
    assert parse_with_env("y=2*5", env) == 10.0
    assert parse_with_env("x+y+3", env) == 15.0


def test_user_defined_functions():
    env = Env()
    assert math.isnan(parse_with_env("f(x)=x*2", env))
    assert env.funcs["f"] == FunctionDef(param="x", body="x*2")
    assert parse_with_env("f(5)", env) == 10.0
    assert parse_with_env("a=3", env) == 3.0
    parse_with_env("g(x)=x+a", env)
    assert parse_with_env("g(4)", env) == 7.0


def test_recursion_guard_gives_nan():
    env = Env()
    parse_with_env("f(x)=f(x)", env)
    result = parse_with_env("f(1)", env)
    assert str(result) == "nan"


def test_unknown_variable_and_function_are_nan():
    unknown_variable = parse("nope + 1")
    unknown_function = parse("frobnicate(2)")
    assert str(unknown_variable) == "nan"
    assert str(unknown_function) == "nan"


def test_syntax_error_is_nan():
    dangling = parse("2 +")
    empty = parse("")
    assert str(dangling) == "nan"
    assert str(empty) == "nan"


def test_builtins_and_constants():
    assert parse("sqrt(16)") == 4.0
    assert parse("sin ( 90 )") == 1.0
    assert parse("pi") == math.pi
    assert parse("round(2.5)") == 3.0


def test_percent_and_shift():
    assert parse("10 % of 200") == 20.0
    assert parse("10 % on 200") == 220.0
    assert parse("1 << 4") == 16.0
    assert parse("16 >> 2") == 4.0
    assert parse("7 % 4") == 3.0


_DAYS = 115.74074074074075


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("10000000000000000 nanoseconds to days", _DAYS),
        ("10000000000000000 nanosecond to days", _DAYS),
        ("10000000000000000 nanosecs to days", _DAYS),
        ("10000000000000000 nanosec to days", _DAYS),
        ("10000000000000000 ns to days", _DAYS),
        ("10000000000000 microseconds to days", _DAYS),
        ("10000000000000 microsecond to days", _DAYS),
        ("10000000000000 microsecs to days", _DAYS),
        ("10000000000000 microsec to days", _DAYS),
        ("10000000000000 \u00b5s to days", _DAYS),
        ("10000000000 milliseconds to days", _DAYS),
        ("10000000000 millisecond to days", _DAYS),
        ("10000000000 millisecs to days", _DAYS),
        ("10000000000 millisec to days", _DAYS),
        ("10000000000 ms to days", _DAYS),
        ("10000000 seconds to days", _DAYS),
        ("10000000 second to days", _DAYS),
        ("10000000 secs to days", _DAYS),
        ("10000000 sec to days", _DAYS),
        ("100000 minutes to days", 69.44444444444444),
        ("100000 minute to days", 69.44444444444444),
        ("100000 min to days", 69.44444444444444),
        ("100 hours to days", 4.166666666666667),
        ("100 hour to days", 4.166666666666667),
        ("100 hrs to days", 4.166666666666667),
        ("100 hr to days", 4.166666666666667),
        ("100 days to days", 100.0),
        ("100 day to days", 100.0),
        ("100 weeks to days", 700.0),
        ("100 week to days", 700.0),
        ("100 wks to days", 700.0),
        ("100 wk to days", 700.0),
        ("1 months to days", 30.436805555555555),
        ("1 month to days", 30.436805555555555),
        ("1 mos to days", 30.436805555555555),
        ("1 mo to days", 30.436805555555555),
        ("100 years to days", 36524.18981481482),
        ("100 year to days", 36524.18981481482),
        ("100 yrs to days", 36524.18981481482),
        ("100 yr to days", 36524.18981481482),
        ("100 decades to days", 365241.89814814815),
        ("100 decade to days", 365241.89814814815),
        ("100 centuries to days", 3652418.9814814813),
        ("100 centry to days", 3652418.9814814813),
        ("100 milleniums to days", 36524219.90740741),
        ("100 millenium to days", 36524219.90740741),
        ("100 millenia to days", 36524219.90740741),
        ("1 min to sec", 60.0),
        ("60 sec to min", 1.0),
        ("1 hr to sec", 3600.0),
    ],
)
def test_time(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("100 metres2 to ha", 0.01), ("100 metre2 to ha", 0.01), ("100 meters2 to ha", 0.01),
        ("100 meter2 to ha", 0.01), ("100 sqm to ha", 0.01), ("100 m2 to ha", 0.01),
        ("0.01 hectare to m2", 100.0), ("0.01 ha to m2", 100.0),
        ("1 kilometres2 to m2", 1000000.0), ("1 kilometre2 to m2", 1000000.0),
        ("1 kilometers2 to m2", 1000000.0), ("1 kilometer2 to m2", 1000000.0),
        ("1 sqkm to m2", 1000000.0), ("1 km2 to m2", 1000000.0),
        ("100 inches2 to m2", 0.064516), ("100 inch2 to m2", 0.064516),
        ("100 sqin to m2", 0.064516), ("100 in2 to m2", 0.064516),
        ("100 feet2 to m2", 9.290304), ("100 foot2 to m2", 9.290304),
        ("100 sqft to m2", 9.290304), ("100 ft2 to m2", 9.290304),
        ("100 yards2 to m2", 83.612736), ("100 yard2 to m2", 83.612736),
        ("100 sqyd to m2", 83.612736), ("100 yd2 to m2", 83.612736),
        ("100 acre to m2", 404685.64224), ("100 ac to m2", 404685.64224),
        ("100 miles2 to m2", 258998811.0336), ("100 mile2 to m2", 258998811.0336),
        ("100 sqmi to m2", 258998811.0336), ("100 mi2 to m2", 258998811.0336),
        ("100 ha to km2", 1.0), ("10000000 in2 to ha", 0.64516),
    ],
)
def test_area(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("100 c to f", 212.0), ("100 C to F", 212.0),
        ("100 f to k", 310.9277777777778), ("100 F to K", 310.9277777777778),
        ("100 c to k", 373.15), ("100 C to K", 373.15),
    ],
)
def test_temperature(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("10000 \u03bcg to kg", 0.001), ("10000 microgram to kg", 0.001),
        ("10000 microgramme to kg", 0.001), ("10000 mcg to kg", 0.001),
        ("1000000 milligram to kg", 1.0), ("1000000 mg to kg", 1.0),
        ("1000 gram to kg", 1.0), ("1000 g to kg", 1.0), ("1 kg to kg", 1.0),
        ("10000 tonne to kg", 10000000.0), ("10000 ton to kg", 10000000.0),
        ("10000 ounce to kg", 283.495), ("10000 pound to kg", 4535.92),
        ("10000 stone to kg", 63502.9), ("10000 short ton to kg", 9071850.0),
        ("10000 long ton to kg", 10160469.088), ("1 kg to g", 1000.0), ("1 mg to g", 0.001),
    ],
)
def test_mass(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("100 mps to kph", 359.9997120002304), ("100 kph to kph", 100.0),
        ("100 kmh to kph", 100.0), ("100 fps to kph", 109.72791221767022),
        ("100 mph to kph", 160.934271252583), ("100 knots to kph", 185.19969184024652),
        ("100 knot to kph", 185.19969184024652), ("100 kn to kph", 185.19969184024652),
        ("100 kt to kph", 185.19969184024652),
    ],
)
def test_speed(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("100 millimeters to meter", 0.1), ("100 millimeter to meter", 0.1),
        ("100 millimetre to meter", 0.1), ("100 millimetres to meter", 0.1),
        ("100 mm to meter", 0.1),
        ("100 centimeters to meter", 1.0), ("100 centimeter to meter", 1.0),
        ("100 centimetres to meter", 1.0), ("100 centimetre to meter", 1.0),
        ("100 cm to meter", 1.0),
        ("100 metres to meter", 100.0), ("100 metre to meter", 100.0),
        ("100 meters to meter", 100.0), ("100 meter to meter", 100.0), ("100 m to meter", 100.0),
        ("100 kilometers to meter", 100000.0), ("100 kilometre to meter", 100000.0),
        ("100 kilometres to meter", 100000.0), ("100 kilometer to meter", 100000.0),
        ("100 km to meter", 100000.0),
        ("100 inches to meter", 2.54), ("100 inch to meter", 2.54), ("100 in to meter", 2.54),
        ("100 foot to meter", 30.48), ("100 feet to meter", 30.48), ("100 ft to meter", 30.48),
        ("100 yards to meter", 91.44), ("100 yard to meter", 91.44), ("100 yd to meter", 91.44),
        ("100 miles to meter", 160934.0), ("100 mile to meter", 160934.0),
        ("100 mi to meter", 160934.0),
        ("100 nautical mile to meter", 185200.0), ("100 mni to meter", 185200.0),
    ],
)
def test_length(expr, expected):
    assert parse(expr) == expected


@pytest.mark.parametrize(
    "units, expected",
    [
        (("bits", "bit"), 0.12499968),
        (("bytes", "byte"), 1.000000512),
        (("kilobits", "kilobit", "kbit"), 128.0),
        (("kilobytes", "kilobyte", "kb"), 1024.0),
        (("megabits", "megabit", "mbit"), 131072.0),
        (("megabytes", "megabyte", "mb"), 1048576.0),
        (("gigabits", "gigabit", "gbit"), 134217728.0),
        (("gigabytes", "gigabyte", "gb"), 1074176000.0),
        (("terabits", "terabit", "tbit"), 137420800000.0),
        (("terabytes", "terabyte", "tb"), 1099776000000.0),
        (("petabits", "petabit", "pbit"), 140697600000000.0),
        (("petabytes", "petabyte", "pb"), 1126400000000000.0),
    ],
)
def test_digital(units, expected):
    for unit in units:
        assert parse(f"1024 {unit} to kb") == expected


def test_conversion_between_categories_is_nan():
    result = parse("100 kg to m")
    assert str(result) == "nan"