"""Linear interpolation of numbers and number lists."""

from __future__ import annotations

from collections.abc import Sequence


def interpolate_num(from_value: float, to_value: float, f: float) -> float:
    """Blend two numbers: ``f`` of 0 gives ``from_value``, 1 gives ``to_value``."""
    return from_value * (1.0 - f) + to_value * f


def interpolate(from_list: Sequence[float], to_list: Sequence[float], f: float) -> list[float]:
    """Blend two equally long lists element by element."""
    if len(from_list) != len(to_list):
        raise ValueError(
            f"mismatched arguments via interpolating {list(from_list)}: {list(to_list)}"
        )
    return [interpolate_num(a, b, f) for a, b in zip(from_list, to_list)]