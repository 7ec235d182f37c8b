from __future__ import annotations

import numbers
import operator
from enum import Enum

import numpy

import maths_util
import settings


class Axis(Enum):
    X = 0
    Y = 1
    Z = 2


class _Constant:
    # A new Vec3 per access, so mutating one never changes the constant.
    def __init__(self, x : float, y : float, z : float):
        self._values = (x, y, z)

    def __get__(self, instance, owner) -> Vec3:
        return owner(*self._values)


class Vec3:
    '''
    Three single-precision components. Arithmetic follows IEEE-754 f32 rules:
    division by zero and overflow give inf / NaN instead of raising.

    There is deliberately no __eq__ or __hash__. NaN components make
    value equality non-reflexive, so comparison is explicit through
    equals_exact() and approx_equals().
    '''
    __slots__ = ("_x", "_y", "_z")

    ZERO = _Constant(0.0, 0.0, 0.0)
    ONE = _Constant(1.0, 1.0, 1.0)

    __hash__ = None

    # Makes numpy scalars on the left defer to our reflected operators.
    __array_ufunc__ = None

    @classmethod
    def from_float(cls, value : float) -> Vec3:
        return cls(value, value, value)

    def __init__(self, x : float, y : float, z : float):
        self._x = maths_util.to_f32(x)
        self._y = maths_util.to_f32(y)
        self._z = maths_util.to_f32(z)

    @property
    def x(self) -> numpy.float32:
        return self._x

    @x.setter
    def x(self, value : float):
        self._x = maths_util.to_f32(value)

    @property
    def y(self) -> numpy.float32:
        return self._y

    @y.setter
    def y(self, value : float):
        self._y = maths_util.to_f32(value)

    @property
    def z(self) -> numpy.float32:
        return self._z

    @z.setter
    def z(self, value : float):
        self._z = maths_util.to_f32(value)

    def component(self, axis : Axis) -> numpy.float32:
        if axis is Axis.X:
            return self._x
        elif axis is Axis.Y:
            return self._y
        elif axis is Axis.Z:
            return self._z
        raise TypeError(f"Expected an Axis. Got {axis!r}.")

    def set_component(self, axis : Axis, value : float):
        if axis is Axis.X:
            self._x = maths_util.to_f32(value)
        elif axis is Axis.Y:
            self._y = maths_util.to_f32(value)
        elif axis is Axis.Z:
            self._z = maths_util.to_f32(value)
        else:
            raise TypeError(f"Expected an Axis. Got {axis!r}.")

    def with_x(self, x : float) -> Vec3:
        return Vec3(x, self._y, self._z)

    def with_y(self, y : float) -> Vec3:
        return Vec3(self._x, y, self._z)

    def with_z(self, z : float) -> Vec3:
        return Vec3(self._x, self._y, z)

    def copy(self) -> Vec3:
        return Vec3(self._x, self._y, self._z)

    __copy__ = copy

    def as_tuple(self) -> tuple[numpy.float32, numpy.float32, numpy.float32]:
        return (self._x, self._y, self._z)

    def as_numpy_array(self) -> numpy.ndarray:
        return numpy.array([self._x, self._y, self._z], dtype=numpy.float32)

    def __iter__(self):
        return iter(self.as_tuple())

    def equals_exact(self, rhs : Vec3) -> bool:
        # IEEE comparison: NaN never matches, 0.0 matches -0.0.
        return bool(self._x == rhs._x and self._y == rhs._y and self._z == rhs._z)

    def approx_equals(self, rhs : Vec3, epsilon : float = None) -> bool:
        if epsilon is None:
            epsilon = settings.get_settings().epsilon
        return maths_util.approx_equal(self._x, rhs._x, epsilon) \
            and maths_util.approx_equal(self._y, rhs._y, epsilon) \
            and maths_util.approx_equal(self._z, rhs._z, epsilon)

    def dot(self, rhs : Vec3) -> numpy.float32:
        with maths_util.ieee_arithmetic():
            return self._x * rhs._x + self._y * rhs._y + self._z * rhs._z

    def cross(self, rhs : Vec3) -> Vec3:
        with maths_util.ieee_arithmetic():
            x = self._y * rhs._z - self._z * rhs._y
            y = self._z * rhs._x - self._x * rhs._z
            z = self._x * rhs._y - self._y * rhs._x
        return Vec3(x, y, z)

    def length_squared(self) -> numpy.float32:
        with maths_util.ieee_arithmetic():
            return (self._x * self._x) + (self._y * self._y) + (self._z * self._z)

    def length(self) -> numpy.float32:
        with maths_util.ieee_arithmetic():
            return numpy.sqrt(self.length_squared())

    # Zero length gives NaN components (0 / 0).
    def normalize(self) -> Vec3:
        return self / self.length()

    def normalize_or_zero(self) -> Vec3:
        length = self.length()
        if length == 0.0 or not numpy.isfinite(length):
            return Vec3.ZERO
        return self / length

    # If only one side is NaN the other side wins.
    def min(self, rhs : Vec3) -> Vec3:
        return Vec3(numpy.fmin(self._x, rhs._x), numpy.fmin(self._y, rhs._y), numpy.fmin(self._z, rhs._z))

    def max(self, rhs : Vec3) -> Vec3:
        return Vec3(numpy.fmax(self._x, rhs._x), numpy.fmax(self._y, rhs._y), numpy.fmax(self._z, rhs._z))

    # Component-wise against another Vec3, or against a scalar broadcast to all three.
    def _combine(self, other, op, reflected=False):
        if isinstance(other, Vec3):
            ox, oy, oz = other._x, other._y, other._z
        elif isinstance(other, numbers.Real):
            ox = oy = oz = maths_util.to_f32(other)
        else:
            return NotImplemented

        with maths_util.ieee_arithmetic():
            if reflected:
                return Vec3(op(ox, self._x), op(oy, self._y), op(oz, self._z))
            return Vec3(op(self._x, ox), op(self._y, oy), op(self._z, oz))

    def _assign(self, result):
        if result is NotImplemented:
            return NotImplemented
        self._x = result._x
        self._y = result._y
        self._z = result._z
        return self

    # Operator overloads.
    def __add__(self, rhs) -> Vec3:
        return self._combine(rhs, operator.add)

    def __radd__(self, lhs) -> Vec3:
        return self._combine(lhs, operator.add, reflected=True)

    def __iadd__(self, rhs) -> Vec3:
        return self._assign(self._combine(rhs, operator.add))

    def __sub__(self, rhs) -> Vec3:
        return self._combine(rhs, operator.sub)

    def __rsub__(self, lhs) -> Vec3:
        return self._combine(lhs, operator.sub, reflected=True)

    def __isub__(self, rhs) -> Vec3:
        return self._assign(self._combine(rhs, operator.sub))

    # Component-wise, not dot or cross.
    def __mul__(self, rhs) -> Vec3:
        return self._combine(rhs, operator.mul)

    def __rmul__(self, lhs) -> Vec3:
        return self._combine(lhs, operator.mul, reflected=True)

    def __imul__(self, rhs) -> Vec3:
        return self._assign(self._combine(rhs, operator.mul))

    def __truediv__(self, rhs) -> Vec3:
        return self._combine(rhs, operator.truediv)

    def __rtruediv__(self, lhs) -> Vec3:
        return self._combine(lhs, operator.truediv, reflected=True)

    def __itruediv__(self, rhs) -> Vec3:
        return self._assign(self._combine(rhs, operator.truediv))

    def __neg__(self) -> Vec3:
        return Vec3(-self._x, -self._y, -self._z)

    def __repr__(self):
        return f"Vec3({self._x}, {self._y}, {self._z})"
