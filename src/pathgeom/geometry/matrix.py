"""
2x3 affine transformation matrix.

Coefficients follow the SVG/canvas convention:

    | a c e |
    | b d f |
    | 0 0 1 |

so a point maps to (a*x + c*y + e, b*x + d*y + f).
"""

import math

import numpy as np
from pydantic import BaseModel, ConfigDict


class Matrix(BaseModel):
    """Immutable affine transform."""
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __init__(self, a=1.0, b=0.0, c=0.0, d=1.0, e=0.0, f=0.0, **data):
        super().__init__(a=a, b=b, c=c, d=d, e=e, f=f, **data)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def translation(cls, tx, ty):
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx, sy=None):
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, angle):
        """Rotation about the origin by angle radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    @classmethod
    def from_array(cls, arr):
        """Build from a 3x3 (or 2x3) numpy array."""
        arr = np.asarray(arr, dtype=float)
        return cls(arr[0, 0], arr[1, 0], arr[0, 1], arr[1, 1], arr[0, 2], arr[1, 2])

    def to_array(self):
        """Homogeneous 3x3 numpy representation."""
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0.0, 0.0, 1.0],
        ])

    def coefficients(self):
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def apply(self, x, y):
        """Transform a coordinate pair."""
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )

    def multiply(self, other):
        """
        Compose with another matrix.

        The result applies `other` first, then this matrix.
        """
        return Matrix.from_array(self.to_array() @ other.to_array())

    def determinant(self):
        return self.a * self.d - self.b * self.c

    def inverse(self):
        """
        Inverse transform.

        Raises:
            ValueError: if the matrix is singular
        """
        if abs(self.determinant()) < 1e-12:
            raise ValueError(f"Matrix is not invertible: {self.coefficients()}")
        return Matrix.from_array(np.linalg.inv(self.to_array()))

    def is_identity(self):
        return self.coefficients() == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
