"""Numeric constants and text formatting for vectors and matrices."""

from __future__ import annotations

import numpy as np

_F32 = np.finfo(np.float32)

PI = float(np.float32(3.14159265358979323846))
TWO_PI = float(np.float32(2.0) * np.float32(PI))
HALF_PI = float(np.float32(0.5) * np.float32(PI))
EPSILON = float(_F32.eps)
FLOAT_MAX = float(_F32.max)
FLOAT_MIN = float(_F32.tiny)


def _num(value) -> str:
    return f"{float(value):g}"


def format_vec3(v) -> str:
    """Format a 3-component vector as ``(x, y, z)``."""
    x, y, z = (float(c) for c in np.asarray(v).reshape(3))
    return f"({_num(x)}, {_num(y)}, {_num(z)})"


def format_mat4(m) -> str:
    """Format a 4x4 matrix one column per line, as the engine's log output does.

    The matrix is taken in mathematical layout (``m[row, column]``); each printed
    line holds one column.
    """
    matrix = np.asarray(m, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    lines = ["\n| " + "".join(f"{_num(value)} " for value in column) for column in matrix.T]
    return "".join(lines) + " |"