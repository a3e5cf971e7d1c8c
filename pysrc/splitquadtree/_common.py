# _common.py
"""Common utilities and constants shared across the package."""

from __future__ import annotations

import math
import struct
from numbers import Integral
from typing import Any

from .geometry import Point, Rectangle

# Type aliases
Bounds = tuple[float, float, float, float]
"""Axis-aligned rectangle as (min_x, min_y, max_x, max_y)."""

# Dtype mappings
QUADTREE_DTYPE_TO_NP_DTYPE = {
    "f32": "float32",
    "f64": "float64",
    "i32": "int32",
    "i64": "int64",
}
"""Mapping from quadtree dtype strings to NumPy dtype strings."""

INTEGRAL_DTYPES = frozenset({"i32", "i64"})


def _is_np_array(x: Any) -> bool:
    """
    Check if x is a NumPy array without importing NumPy.

    This allows dtype checking without forcing NumPy as a hard dependency.

    Args:
        x: Object to check.

    Returns:
        True if x is a NumPy array.
    """
    mod = getattr(x.__class__, "__module__", "")
    return mod.startswith("numpy") and hasattr(x, "ndim") and hasattr(x, "shape")


def validate_dtype(dtype: str) -> str:
    """
    Raises:
        TypeError: If dtype is not one of 'f32', 'f64', 'i32', 'i64'.
    """
    if dtype not in QUADTREE_DTYPE_TO_NP_DTYPE:
        raise TypeError(f"Unsupported dtype: {dtype}")
    return dtype


def as_rectangle(rect: Any) -> Rectangle:
    """
    Normalize a Rectangle or a sequence of 4 numbers to a Rectangle.

    Raises:
        ValueError: If rect does not have four values.
    """
    if type(rect) is Rectangle:
        return rect
    if type(rect) is not tuple:
        rect = tuple(rect)
    if len(rect) != 4:
        raise ValueError(
            "bounds must be a tuple of four numeric values (x min, y min, x max, y max)"
        )
    return Rectangle(*rect)


def validate_bounds(bounds: Any, dtype: str) -> Rectangle:
    """
    Validate and normalize tree bounds to a Rectangle.

    Args:
        bounds: Bounds as a Rectangle or sequence of 4 numbers.
        dtype: Quadtree dtype the coordinates must fit.

    Returns:
        Validated bounds.

    Raises:
        ValueError: If bounds are not four values, not finite, or min exceeds max.
        TypeError: If a coordinate does not fit the dtype.
    """
    rect = as_rectangle(bounds)
    x0, y0, x1, y1 = (coerce_coord(v, dtype) for v in rect)
    if dtype not in INTEGRAL_DTYPES and not all(math.isfinite(v) for v in (x0, y0, x1, y1)):
        raise ValueError(f"bounds must be finite, got ({x0}, {y0}, {x1}, {y1})")
    if x0 > x1 or y0 > y1:
        raise ValueError(
            f"bounds must satisfy min <= max on both axes, got ({x0}, {y0}, {x1}, {y1})"
        )
    return Rectangle(x0, y0, x1, y1)


def coerce_coord(v: Any, dtype: str) -> Any:
    """
    Convert a single coordinate to the Python type backing ``dtype``.

    Raises:
        TypeError: If an integral dtype receives a non-integral value.
        ValueError: If an f32 dtype receives a value beyond float32 range.
    """
    if dtype in INTEGRAL_DTYPES:
        if not isinstance(v, Integral):
            raise TypeError(f"Coordinate {v!r} is not integral for dtype {dtype}")
        return int(v)
    if dtype == "f32":
        return _to_f32(float(v))
    return float(v)


def _to_f32(v: float) -> float:
    """Round a double to the nearest float32, as NumPy stores it."""
    try:
        return struct.unpack("f", struct.pack("f", v))[0]
    except OverflowError:
        raise ValueError(f"Coordinate {v!r} does not fit dtype f32") from None


def coerce_point(geom: Any, dtype: str) -> Point:
    """
    Normalize a Point or (x, y) sequence to a Point of the dtype's type.

    Raises:
        ValueError: If geom does not have two values.
        TypeError: If a coordinate does not fit the dtype.
    """
    if type(geom) is not tuple and type(geom) is not Point:
        geom = tuple(geom)
    if len(geom) != 2:
        raise ValueError("point must be a tuple of two numeric values (x, y)")
    x, y = geom
    return Point(coerce_coord(x, dtype), coerce_coord(y, dtype))


def validate_np_dtype(geoms: Any, expected_dtype: str) -> None:
    """
    Validate that a NumPy array's dtype matches expected dtype.

    Args:
        geoms: NumPy array to validate.
        expected_dtype: Expected quadtree dtype ('f32', 'f64', 'i32', 'i64').

    Raises:
        TypeError: If dtype doesn't match.
    """
    expected_np_dtype = QUADTREE_DTYPE_TO_NP_DTYPE.get(expected_dtype)
    if geoms.dtype != expected_np_dtype:
        raise TypeError(
            f"NumPy array dtype {geoms.dtype} does not match quadtree dtype {expected_dtype}"
        )
