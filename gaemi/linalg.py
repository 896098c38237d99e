"""Vector type and 4x4 matrix transformations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class Vec2:
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


def _vec3(values: Sequence[float]) -> np.ndarray:
    vec = np.asarray(values, dtype=float)
    if vec.shape != (3,):
        raise ValueError("expected a three-component vector")
    return vec


def _mat4(transform) -> np.ndarray:
    mat = np.asarray(transform, dtype=float)
    if mat.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    return mat


def identity() -> np.ndarray:
    """4x4 identity matrix."""
    return np.eye(4)


def translate(transform, translation) -> np.ndarray:
    """Post-multiply transform by a translation."""
    t = np.eye(4)
    t[:3, 3] = _vec3(translation)
    return _mat4(transform) @ t


def rotate(transform, radian_angle: float, axis) -> np.ndarray:
    """Post-multiply transform by a rotation about axis."""
    a = _vec3(axis)
    norm = np.linalg.norm(a)
    if norm == 0.0:
        raise ValueError("rotation axis must not be zero")
    a = a / norm
    c = math.cos(radian_angle)
    s = math.sin(radian_angle)
    cross = np.array(
        [[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]]
    )
    r = np.eye(4)
    r[:3, :3] = c * np.eye(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return _mat4(transform) @ r


def scale(transform, factors) -> np.ndarray:
    """Post-multiply transform by a scaling."""
    s = np.eye(4)
    s[:3, :3] = np.diag(_vec3(factors))
    return _mat4(transform) @ s


def perspective(radian_fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(radian_fov_y / 2.0)
    p = np.zeros((4, 4))
    p[0, 0] = f / aspect
    p[1, 1] = f
    p[2, 2] = -(far + near) / (far - near)
    p[2, 3] = -(2.0 * far * near) / (far - near)
    p[3, 2] = -1.0
    return p