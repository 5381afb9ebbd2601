"""Geometry value types: vectors, quaternions and colors.

All types are frozen so they can be shared freely between components.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vec3:
    """World-space 3-vector (Y up, -Z forward)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return self.scale(scalar)

    __rmul__ = __mul__

    def scale(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def is_close(self, other: Vec3, abs_tol: float = 1e-9) -> bool:
        """Component-wise approximate equality."""
        return all(
            math.isclose(a, b, abs_tol=abs_tol)
            for a, b in ((self.x, other.x), (self.y, other.y), (self.z, other.z))
        )

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_any(cls, value: Any) -> Vec3:
        """Accept a Vec3, an ``{x, y, z}`` mapping or a 3-sequence."""
        if isinstance(value, Vec3):
            return value
        if isinstance(value, dict):
            return cls(float(value["x"]), float(value["y"]), float(value["z"]))
        x, y, z = value
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True, slots=True)
class Quat:
    """Rotation quaternion stored as (x, y, z, w); identity is (0, 0, 0, 1)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quat) -> Quat:
        """Hamilton product: ``(a * b).rotate(v) == a.rotate(b.rotate(v))``."""
        return Quat(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def norm(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalized(self) -> Quat:
        n = self.norm()
        if n == 0.0:
            raise ValueError("Cannot normalize a zero quaternion")
        return Quat(self.x / n, self.y / n, self.z / n, self.w / n)

    def inverse(self) -> Quat:
        n2 = self.x**2 + self.y**2 + self.z**2 + self.w**2
        if n2 == 0.0:
            raise ValueError("Cannot invert a zero quaternion")
        c = self.conjugate()
        return Quat(c.x / n2, c.y / n2, c.z / n2, c.w / n2)

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        u = Vec3(self.x, self.y, self.z)
        t = u.cross(v) * 2.0
        return v + t * self.w + u.cross(t)

    def is_close(self, other: Quat, abs_tol: float = 1e-9) -> bool:
        """Approximate equality; q and -q describe the same rotation."""
        pairs = ((self.x, other.x), (self.y, other.y), (self.z, other.z), (self.w, other.w))
        same = all(math.isclose(a, b, abs_tol=abs_tol) for a, b in pairs)
        flipped = all(math.isclose(a, -b, abs_tol=abs_tol) for a, b in pairs)
        return same or flipped

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z, "w": self.w}

    @classmethod
    def from_any(cls, value: Any) -> Quat:
        """Accept a Quat, an ``{x, y, z, w}`` mapping or a 4-sequence (x, y, z, w)."""
        if isinstance(value, Quat):
            return value
        if isinstance(value, dict):
            return cls(
                float(value["x"]), float(value["y"]), float(value["z"]), float(value["w"])
            )
        x, y, z, w = value
        return cls(float(x), float(y), float(z), float(w))


IDENTITY = Quat()


@dataclass(frozen=True, slots=True)
class Color:
    """8-bit RGB color."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range 0-255: {channel}")

    def as_dict(self) -> dict[str, int]:
        return {"red": self.red, "green": self.green, "blue": self.blue}
