"""Command-line argument validation and conversion for the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MAX_PHILOSOPHERS = 200
_WHITESPACE = " \t\n\v\f\r"
_INT_MAX = 2147483647


class ConfigError(ValueError):
    """Raised when the simulation arguments are invalid."""


@dataclass(frozen=True)
class Config:
    """Validated simulation settings; times are in microseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: int | None = None


def _to_int32(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > _INT_MAX else value


def parse_long(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped and a sign is accepted only when a digit
    follows it. Parsing stops at the first non-digit. A value outside the
    32-bit signed range yields -1.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if len(rest) > 1 and rest[0] == "-" and rest[1].isdigit():
        sign = -1
        rest = rest[1:]
    if len(rest) > 1 and rest[0] == "+" and rest[1].isdigit():
        rest = rest[1:]
    limit = _INT_MAX if sign == 1 else _INT_MAX + 1
    result = 0
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > limit:
            return -1
    return result * sign


def check_no_letters(args: Sequence[str]) -> None:
    """Reject any argument that contains an ASCII letter."""
    for number, arg in enumerate(args, start=1):
        if any(("A" <= c <= "Z") or ("a" <= c <= "z") for c in arg):
            raise ConfigError(f"Argument {number} has invalid input")


def check_signs(args: Sequence[str]) -> None:
    """Reject signs that appear anywhere but before the leading digits."""
    for number, arg in enumerate(args, start=1):
        rest = arg[1:] if arg[:1] in ("+", "-") else arg
        rest = rest.lstrip("0123456789")
        if "+" in rest or "-" in rest:
            raise ConfigError(f"Argument {number} has invalid input")


def parse_config(args: Sequence[str]) -> Config:
    """Validate the operands (without the program name) and build a Config."""
    if len(args) not in (4, 5):
        raise ConfigError("Wrong number of arguments")
    check_no_letters(args)
    check_signs(args)
    philosophers = _to_int32(parse_long(args[0]))
    time_to_die = _to_int32(parse_long(args[1]) * 1000)
    time_to_eat = _to_int32(parse_long(args[2]) * 1000)
    time_to_sleep = _to_int32(parse_long(args[3]) * 1000)
    max_meals = None
    if len(args) == 5:
        max_meals = parse_long(args[4])
        if max_meals < 0:
            raise ConfigError("All arguments must be only positive numbers")
    if philosophers > MAX_PHILOSOPHERS:
        raise ConfigError("Number of philosophers must be less than 200")
    if min(philosophers, time_to_die, time_to_sleep, time_to_eat) <= 0:
        raise ConfigError("All arguments must be only positive numbers")
    return Config(philosophers, time_to_die, time_to_eat, time_to_sleep, max_meals)