"""Device color conversion for content stream color operands.

Every supported color space is reduced to an ``(r, g, b)`` triple of floats
in the 0-1 range, the same representation ``rg``/``RG`` operands use.
"""

from __future__ import annotations

RGB = tuple[float, float, float]

# Number of operands each device color space takes.
COMPONENTS = {"gray": 1, "rgb": 3, "cmyk": 4}


def _clamp(v: float) -> float:
    return max(0.0, min(1.0, v))


def to_rgb(operands: list[float], color_space: str) -> RGB:
    """Convert PDF color operands to a normalized ``(r, g, b)`` triple.

    Supports:
    - ``rgb`` (rg/RG): 3 floats 0-1
    - ``gray`` (g/G): 1 float 0-1
    - ``cmyk`` (k/K): 4 floats 0-1

    Raises ValueError when the color space is unknown or too few operands
    are given.
    """
    cs = color_space.lower()
    needed = COMPONENTS.get(cs)
    if needed is None:
        raise ValueError(f"Unsupported color space: {color_space!r}")
    if len(operands) < needed:
        raise ValueError(
            f"{color_space} color needs {needed} operand(s), got {len(operands)}"
        )

    if cs == "rgb":
        return (_clamp(operands[0]), _clamp(operands[1]), _clamp(operands[2]))
    if cs == "gray":
        v = _clamp(operands[0])
        return (v, v, v)
    c, m, y, k = (_clamp(o) for o in operands[:4])
    return ((1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k))


def max_channel_delta(r: float, g: float, b: float) -> float:
    """Largest pairwise difference between the three channels."""
    return max(abs(r - g), abs(g - b), abs(r - b))
