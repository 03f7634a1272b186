"""Vector, quaternion and projection helpers.

Quaternions are numpy arrays ordered (w, x, y, z). Rotation matrices hold the
rotated basis vectors in their columns.
"""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "normalize",
    "quat_from_matrix",
    "matrix_from_quat",
    "perspective",
    "ortho",
    "euler_zxy_from_quat",
    "quat_from_euler_zxy",
]

_GIMBAL_LIMIT = 0.9999999


def normalize(vec) -> np.ndarray:
    """Return the unit vector pointing along ``vec``."""
    v = np.asarray(vec, dtype=np.float64)
    length = np.linalg.norm(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def quat_from_matrix(matrix) -> np.ndarray:
    """Unit quaternion (w, x, y, z) for a 3x3 rotation matrix."""
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        s = 0.5 / math.sqrt(trace + 1.0)
        quat = (
            0.25 / s,
            (m[2, 1] - m[1, 2]) * s,
            (m[0, 2] - m[2, 0]) * s,
            (m[1, 0] - m[0, 1]) * s,
        )
    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
        quat = (
            (m[2, 1] - m[1, 2]) / s,
            0.25 * s,
            (m[0, 1] + m[1, 0]) / s,
            (m[0, 2] + m[2, 0]) / s,
        )
    elif m[1, 1] > m[2, 2]:
        s = 2.0 * math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
        quat = (
            (m[0, 2] - m[2, 0]) / s,
            (m[0, 1] + m[1, 0]) / s,
            0.25 * s,
            (m[1, 2] + m[2, 1]) / s,
        )
    else:
        s = 2.0 * math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
        quat = (
            (m[1, 0] - m[0, 1]) / s,
            (m[0, 2] + m[2, 0]) / s,
            (m[1, 2] + m[2, 1]) / s,
            0.25 * s,
        )
    return normalize(quat)


def matrix_from_quat(quat) -> np.ndarray:
    """3x3 rotation matrix for a quaternion (w, x, y, z)."""
    w, x, y, z = normalize(quat)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def perspective(left, right, top, bottom, near, far) -> np.ndarray:
    """Perspective projection for an off-axis view frustum."""
    m = np.zeros((4, 4))
    m[0, 0] = 2.0 * near / (right - left)
    m[1, 1] = 2.0 * near / (top - bottom)
    m[0, 2] = (right + left) / (right - left)
    m[1, 2] = (top + bottom) / (top - bottom)
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2.0 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


def ortho(width, height, near, far) -> np.ndarray:
    """Orthographic projection of a centred box of the given size."""
    m = np.eye(4)
    m[0, 0] = 2.0 / width
    m[1, 1] = 2.0 / height
    m[2, 2] = -2.0 / (far - near)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _rot_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rot_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rot_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def euler_zxy_from_quat(quat) -> tuple[float, float, float]:
    """Intrinsic Z-X-Y Euler angles (x, y, z) of a quaternion."""
    m = matrix_from_quat(quat)
    x = math.asin(max(-1.0, min(1.0, m[2, 1])))
    if abs(m[2, 1]) < _GIMBAL_LIMIT:
        y = math.atan2(-m[2, 0], m[2, 2])
        z = math.atan2(-m[0, 1], m[1, 1])
    else:
        y = 0.0
        z = math.atan2(m[1, 0], m[0, 0])
    return x, y, z


def quat_from_euler_zxy(x, y, z) -> np.ndarray:
    """Quaternion of intrinsic Z-X-Y Euler angles."""
    return quat_from_matrix(_rot_z(z) @ _rot_x(x) @ _rot_y(y))