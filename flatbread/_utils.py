# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT


import inspect
import re

_SEPARATOR = re.compile(r"[\s,]+")


def default_param_value(function, name):
    sig = inspect.signature(function)
    params = sig.parameters
    return params[name].default


def parse_points(text: str) -> list[tuple[float, float]]:
    """Parses one "x,y" or "x y" point per line, skipping blanks and # comments."""
    points = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue

        values = _SEPARATOR.split(line)
        if len(values) != 2:
            raise ValueError(f"line {lineno}: expected two coordinates, got {line!r}")

        try:
            points.append((float(values[0]), float(values[1])))
        except ValueError:
            raise ValueError(f"line {lineno}: invalid coordinates {line!r}") from None

    return points


def format_number(val: float, places: int = 4) -> str:
    text = f"{float(val):.{places}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
