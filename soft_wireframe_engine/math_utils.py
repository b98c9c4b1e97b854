#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Thin vector/matrix layer over numpy.

Matrices follow the left-handed, row-vector convention: a point is a row
``[x, y, z, 1]`` multiplied on the left of the matrix, so transforms
compose left to right (``world @ view @ projection``).
"""

import math

import numpy as np


class Vec3:
    """Mutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def zero(cls) -> 'Vec3':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> 'Vec3':
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def from_sequence(cls, values) -> 'Vec3':
        x, y, z = values
        return cls(x, y, z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    scale = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        m = self.length()
        if m == 0:
            return Vec3(0, 0, 0)
        return self / m

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


class Mat4:
    """4x4 matrix stored as a numpy array in ``m`` ([row][col])."""
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            self.m = np.zeros((4, 4), dtype=np.float64)
        else:
            self.m = np.array(data, dtype=np.float64).reshape(4, 4)

    def __repr__(self):
        return f"Mat4({self.m.tolist()!r})"

    @classmethod
    def zero(cls) -> 'Mat4':
        return cls()

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(np.eye(4, dtype=np.float64))

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        mat = cls.identity()
        mat.m[3, :3] = (x, y, z)
        return mat

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1, 1] = c
        mat.m[1, 2] = s
        mat.m[2, 1] = -s
        mat.m[2, 2] = c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0, 0] = c
        mat.m[0, 2] = -s
        mat.m[2, 0] = s
        mat.m[2, 2] = c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0, 0] = c
        mat.m[0, 1] = s
        mat.m[1, 0] = -s
        mat.m[1, 1] = c
        return mat

    @classmethod
    def rotation_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> 'Mat4':
        """Roll about Z, then pitch about X, then yaw about Y."""
        return cls.rotation_z(roll) @ cls.rotation_x(pitch) @ cls.rotation_y(yaw)

    @classmethod
    def look_at_lh(cls, eye: Vec3, target: Vec3, up: Vec3) -> 'Mat4':
        """Left-handed view matrix looking from ``eye`` towards ``target``."""
        z_axis = (target - eye).normalize()
        if z_axis.length() == 0:
            z_axis = Vec3(0.0, 0.0, 1.0)

        x_axis = up.cross(z_axis).normalize()
        if x_axis.length() == 0:
            # up is parallel to the view direction
            x_axis = Vec3(1.0, 0.0, 0.0)

        y_axis = z_axis.cross(x_axis).normalize()

        mat = cls.identity()
        mat.m[:3, 0] = x_axis.to_array()
        mat.m[:3, 1] = y_axis.to_array()
        mat.m[:3, 2] = z_axis.to_array()
        mat.m[3, :3] = (-x_axis.dot(eye), -y_axis.dot(eye), -z_axis.dot(eye))
        return mat

    @classmethod
    def perspective_fov_lh(cls, fov: float, aspect: float,
                           znear: float, zfar: float) -> 'Mat4':
        """Left-handed perspective projection; ``fov`` is vertical, in radians."""
        t = 1.0 / math.tan(fov * 0.5)
        mat = cls()
        mat.m[0, 0] = t / aspect
        mat.m[1, 1] = t
        mat.m[2, 2] = zfar / (zfar - znear)
        mat.m[2, 3] = 1.0
        mat.m[3, 2] = (znear * zfar) / (znear - zfar)
        return mat

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(self.m @ other.m)
        return NotImplemented

    multiply = __matmul__

    def transform_coordinates(self, v: Vec3) -> Vec3:
        """Transform ``v`` as a point (w=1) and apply the perspective divide.

        Raises ZeroDivisionError when the homogeneous w comes out as zero.
        """
        x, y, z, w = np.array([v.x, v.y, v.z, 1.0]) @ self.m
        if w == 0.0:
            raise ZeroDivisionError("homogeneous w is zero")
        return Vec3(x / w, y / w, z / w)
