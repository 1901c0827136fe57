# qubitcalc

A notepad-style calculator. Each line of input is evaluated on its own and
gets its own result. Results that are ordinary finite, non-zero numbers are
added up into a total. A line can do arithmetic, assign a variable, define a
one-argument function or convert between units. Variables and functions
carry over to the lines after them.

## Installation

```
pip install .
```

## Command line

```
qubitcalc [FILE ...]
```

`qubitcalc` reads the lines of the given files, or of standard input when no
file is given. It prints one result per line and then a final `Total: ...`
line. A line that has no numeric result (an error, or a function
definition) prints `-`. Whole numbers print without a decimal part. Other
numbers are rounded to fit in about twelve characters, with exponential
notation when that is shorter.

Example input:

```
2 + 2 + sin ( 90 )
12 kg to g
x = 2 * 5
f(n) = n * x
f(3)
100 c to f
```

## What a line can hold

- Arithmetic: `+ - * / % ^`. Word forms are also accepted: `plus`, `with`,
  `add`, `minus`, `without`, `subtract`, `times`, `mul`, `multiply by`,
  `div`, `divide by` and `mod`.
- Precedence, from loosest to tightest: addition and subtraction;
  multiplication and division; modulus; power (right-associative);
  percentages; shifts.
- Shifts: `<<` and `>>` work on the integer parts of the operands.
- Percentages: `percent of` or `% of` gives `a / 100 * b`. `percent on` or
  `% on` gives `a / 100 * b + b`.
- Constants: `pi`, `e` and `tau`.
- Built-in functions: `sin`, `cos` and `tan` (which take degrees), `asin`,
  `acos`, `atan`, `sinh`, `cosh`, `tanh`, `asinh`, `acosh`, `atanh`, `log`
  (base 10), `sqrt`, `cbrt`, `round`, `ceil` and `floor`.
- Variables: `x = 2`, then `x + 3`. An unknown name evaluates to NaN.
- Functions: `f(x) = x * 2`, then `f(5)`. A function body may use global
  variables. A definition line has no numeric result. Calls nested more
  than 64 levels deep give NaN.
- Conversions: `<number> <unit> to <unit>` (or `in` instead of `to`). Unit
  names are not case-sensitive. Conversions cover temperature, acceleration,
  angle, length, mass, time, area, speed and digital information. Examples:
  `100 miles to meter`, `1024 mb to kb`, `100 f to k`, `10000 short ton to kg`.
  Converting between different kinds of unit gives NaN.

## Library use

```python
from qubitcalc.parser import Env, parse, parse_with_env

parse("2^(3*4)")            # 4096.0
parse("100 hours to days")  # 4.166666666666667

env = Env()
parse_with_env("x=2", env)      # 2.0
parse_with_env("x+3", env)      # 5.0
parse_with_env("f(x)=x*2", env) # nan, but env.funcs now holds f
parse_with_env("f(5)", env)     # 10.0
```

Invalid input yields `nan` rather than raising.

To evaluate a whole sheet of lines:

```python
from qubitcalc.app import process_input, format_number

result = process_input("2 + 2\n12 kg to g\n")
print(result.output)                # "4\n12000\n"
print(format_number(result.total))  # "12004"
```

`process_input` returns a `CalculationResult` with `output` and `total`.
`format_number` shows NaN as `-`.

To convert units directly:

```python
from qubitcalc.units import Length, Temperature, convert, conversion_factor, parse_unit

convert(100.0, Temperature.CELSIUS, Temperature.FAHRENHEIT)  # 212.0
convert(100.0, Length.MILE, Length.METRE)
conversion_factor(Length.KILOMETRE)                          # 1000.0
unit = parse_unit("LENGTH::NAUTICAL_MILE")                   # Length.NAUTICAL_MILE
```

`parse_unit` raises `UnitError` for an unknown name. `conversion_factor`
also raises `UnitError` for temperatures, because they have no fixed
factor.

To format a number within a range of widths:

```python
from qubitcalc.pretty import pretty_float

pretty_float(12.345, 5, 5)        # "12.35"
pretty_float(1234500000.0, 5, 5)  # "1.2e9"
```

## What it does not do

There is no graphical window and no editor that recalculates as you type.
The calculator is used from the command line, on files or standard input,
or as a library.

## Running the tests

```
pip install ".[test]"
pytest
```