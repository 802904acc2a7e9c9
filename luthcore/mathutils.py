"""Transform, projection and frustum helpers built on numpy.

Matrices use mathematical layout: ``m[row, column]`` and points are column
vectors, so a transform applies as ``m @ p``. Quaternions are ``(w, x, y, z)``.
Projections map depth to the ``[0, 1]`` range in a right-handed system.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def _vector(value, size: int, name: str) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"{name} must have {size} components")
    return array


def translation_matrix(translation) -> np.ndarray:
    """Return a 4x4 matrix translating by ``translation``."""
    m = np.eye(4)
    m[:3, 3] = _vector(translation, 3, "translation")
    return m


def scale_matrix(scale) -> np.ndarray:
    """Return a 4x4 matrix scaling by ``scale``."""
    return np.diag(np.append(_vector(scale, 3, "scale"), 1.0))


def quat_from_euler(euler) -> np.ndarray:
    """Build a quaternion from Euler angles (x, y, z) in radians."""
    angles = _vector(euler, 3, "euler") * 0.5
    cx, cy, cz = np.cos(angles)
    sx, sy, sz = np.sin(angles)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def quat_to_mat4(q) -> np.ndarray:
    """Return the 4x4 rotation matrix of a unit quaternion."""
    w, x, y, z = _vector(q, 4, "quaternion")
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def quat_conjugate(q) -> np.ndarray:
    """Return the conjugate of a quaternion."""
    w, x, y, z = _vector(q, 4, "quaternion")
    return np.array([w, -x, -y, -z])


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """Right-handed perspective projection with depth in ``[0, 1]``."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = far / (near - far)
    m[3, 2] = -1.0
    m[2, 3] = -(far * near) / (far - near)
    return m


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """Right-handed orthographic projection with depth in ``[0, 1]``."""
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -1.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -near / (far - near)
    return m


def normal_matrix(model_matrix) -> np.ndarray:
    """Return the inverse transpose of the upper 3x3 of a model matrix."""
    return np.linalg.inv(mat4_to_mat3(model_matrix)).T


def mat4_to_mat3(m) -> np.ndarray:
    """Return the upper-left 3x3 block of a 4x4 matrix."""
    return np.array(np.asarray(m, dtype=np.float64)[:3, :3])


def compose_transform(translation, rotation, scale) -> np.ndarray:
    """Combine translation, rotation quaternion and scale as ``T @ R @ S``."""
    return translation_matrix(translation) @ quat_to_mat4(rotation) @ scale_matrix(scale)


def _quat_from_rotation(r: np.ndarray) -> np.ndarray:
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0:
        s = math.sqrt(trace + 1.0) * 2
        q = [0.25 * s, (r[2, 1] - r[1, 2]) / s, (r[0, 2] - r[2, 0]) / s, (r[1, 0] - r[0, 1]) / s]
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2
        q = [(r[2, 1] - r[1, 2]) / s, 0.25 * s, (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s]
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2
        q = [(r[0, 2] - r[2, 0]) / s, (r[0, 1] + r[1, 0]) / s, 0.25 * s, (r[1, 2] + r[2, 1]) / s]
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2
        q = [(r[1, 0] - r[0, 1]) / s, (r[0, 2] + r[2, 0]) / s, (r[1, 2] + r[2, 1]) / s, 0.25 * s]
    return np.array(q)


def decompose_transform(transform):
    """Split a transform into ``(translation, rotation, scale)``.

    The parts satisfy ``compose_transform(*parts) == transform`` for matrices
    built from translation, rotation and scale.
    """
    m = np.array(transform, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError("transform must be a 4x4 matrix")
    if m[3, 3] == 0:
        raise ValueError("cannot decompose a matrix whose w component is zero")
    m /= m[3, 3]

    translation = m[:3, 3].copy()
    c0, c1, c2 = (m[:3, i].copy() for i in range(3))

    def _normalized(v: np.ndarray) -> tuple[np.ndarray, float]:
        length = float(np.linalg.norm(v))
        if length == 0:
            raise ValueError("cannot decompose a matrix with a zero scale axis")
        return v / length, length

    c0, sx = _normalized(c0)
    c1 = c1 - (c0 @ c1) * c0
    c1, sy = _normalized(c1)
    c2 = c2 - (c0 @ c2) * c0
    c2 = c2 - (c1 @ c2) * c1
    c2, sz = _normalized(c2)

    scale = np.array([sx, sy, sz])
    if c0 @ np.cross(c1, c2) < 0:
        scale = -scale
        c0, c1, c2 = -c0, -c1, -c2

    rotation = _quat_from_rotation(np.column_stack([c0, c1, c2]))
    return translation, rotation, scale


@dataclass
class Frustum:
    """Six clipping planes (left, right, bottom, top, near, far) as ``(a, b, c, d)``."""

    planes: np.ndarray = field(default_factory=lambda: np.zeros((6, 4)))


def create_frustum_from_camera(view_proj, normalize=True) -> Frustum:
    """Extract the frustum planes of a view-projection matrix."""
    r0, r1, r2, r3 = np.asarray(view_proj, dtype=np.float64)
    planes = np.array([r3 + r0, r3 - r0, r3 + r1, r3 - r1, r3 + r2, r3 - r2])
    if normalize:
        planes = planes / np.linalg.norm(planes[:, :3], axis=1, keepdims=True)
    return Frustum(planes)


def is_in_frustum(frustum: Frustum, point, radius=0.0) -> bool:
    """Whether a sphere at ``point`` with ``radius`` is not fully outside any plane."""
    p = _vector(point, 3, "point")
    distances = frustum.planes[:, :3] @ p + frustum.planes[:, 3]
    return not bool(np.any(distances < -radius))