"""
Input validators for the interactive menu.

Each parse_* function turns one line of user input into a value or raises
InputRejected. The prompt_* helpers keep asking until parsing succeeds.
"""
from __future__ import annotations

import math
from typing import Callable, TypeVar

import typer

T = TypeVar("T")

Reader = Callable[[str], str]


class InputRejected(ValueError):
    """The line cannot be used; the message is shown to the user before asking again."""


def read_line(text: str) -> str:
    # default="" lets an empty line through so the validator can reject it
    return typer.prompt(text, default="", show_default=False, prompt_suffix="")


def _parse_number(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        raise InputRejected("Enter a number.") from None
    if not math.isfinite(value):
        raise InputRejected("Enter a number.")
    return value


def parse_non_empty_string(text: str) -> str:
    value = text.strip()
    if not value:
        raise InputRejected("String must not be empty.")
    return value


def parse_positive_real(text: str, upper: float = 1_000_000.0) -> float:
    value = _parse_number(text)
    if value <= 0.0:
        raise InputRejected("Value must be greater than 0.")
    if value > upper:
        limit = f"{upper:.0f}" if float(upper).is_integer() else f"{upper:.2f}"
        raise InputRejected(f"Value must not exceed {limit}.")
    return value


def parse_discount_percent(text: str) -> float:
    value = _parse_number(text)
    if value < 0.0:
        raise InputRejected("Value must not be negative.")
    if value >= 100.0:
        raise InputRejected("Discount percent must be less than 100.")
    return value


def parse_menu_choice(text: str, low: int, high: int) -> int:
    value = text.strip()
    if not value:
        raise InputRejected("Enter a number.")
    # isdigit() alone accepts non-ASCII digits such as '²'
    if not (value.isascii() and value.isdigit()):
        raise InputRejected("Enter a whole number.")
    choice = int(value)
    if choice < low or choice > high:
        raise InputRejected(f"Number must be in range [{low}, {high}].")
    return choice


def prompt_until_valid(text: str, parse: Callable[[str], T], read: Reader = read_line) -> T:
    while True:
        try:
            return parse(read(text))
        except InputRejected as exc:
            typer.echo(f"Error: {exc} Try again.")


def prompt_non_empty_string(text: str, read: Reader = read_line) -> str:
    return prompt_until_valid(text, parse_non_empty_string, read)


def prompt_positive_real(text: str, upper: float = 1_000_000.0, read: Reader = read_line) -> float:
    return prompt_until_valid(text, lambda line: parse_positive_real(line, upper), read)


def prompt_discount_percent(text: str, read: Reader = read_line) -> float:
    return prompt_until_valid(text, parse_discount_percent, read)


def prompt_menu_choice(text: str, low: int, high: int, read: Reader = read_line) -> int:
    return prompt_until_valid(text, lambda line: parse_menu_choice(line, low, high), read)
