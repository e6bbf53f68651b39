# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

"""Argument checks shared by the geometry and segment constructors"""

import numbers
from typing import Sized


class InvalidArgumentError(ValueError):
    def __init__(self, message: str, param_name: str):
        super().__init__(f"{param_name}: {message}")
        self.param_name = param_name


def not_none(value, name: str):
    if value is None:
        raise InvalidArgumentError("missing input, got None", name)
    return value


def must_be_integer(value, name: str):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"must be an integer, got {type(value).__name__} {value!r}", name
        )
    return value


def must_be_at_least(value, minimum, name: str):
    if value < minimum:
        raise InvalidArgumentError(
            f"must be greater than or equal to {minimum}, got {value}", name
        )
    return value


def must_have_at_least(items: Sized, minimum: int, name: str, what: str = "points"):
    not_none(items, name)

    if len(items) < minimum:
        raise InvalidArgumentError(
            f"insufficient {what}, need at least {minimum}, got {len(items)}", name
        )
    return items
