"""
Shared primitive data types for the game.

Basic geometric and color types used by the entities, the collision
resolver and the skins.
"""

import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities and sizes.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> (pos + Point2D(x=1.0, y=1.0)).x
        101.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __add__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: 'Point2D') -> 'Point2D':
        return Point2D(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> 'Point2D':
        return Point2D(x=self.x * scalar, y=self.y * scalar)

    @property
    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> 'Point2D':
        """Return the unit vector in the same direction.

        The zero vector has no direction and is returned unchanged.
        """
        length = self.length
        if length == 0:
            return self
        return Point2D(x=self.x / length, y=self.y / length)

    def signum(self) -> 'Point2D':
        """Component-wise sign: -1, 0 or +1 per axis."""
        return Point2D(x=_sign(self.x), y=_sign(self.y))

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Velocities and offsets read better as vectors
Vector2D = Point2D


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Examples:
        >>> red = Color(r=230, g=41, b=55)
        >>> red.as_rgb_tuple
        (230, 41, 55)
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle.

    Position is the top-left corner (pygame convention). Dimensions may be
    zero: two rectangles that only touch along an edge intersect in a
    zero-width (or zero-height) rectangle.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (non-negative)
        height: Height of rectangle (non-negative)

    Examples:
        >>> a = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
        >>> b = Rectangle(x=50.0, y=80.0, width=100.0, height=100.0)
        >>> a.intersection(b)
        Rectangle(x=50.0, y=80.0, width=50.0, height=20.0)
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_dimensions(cls, v: float) -> float:
        """Validate dimensions are not negative."""
        if v < 0:
            raise ValueError(f'Rectangle dimensions must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def position(self) -> Point2D:
        """Top-left corner."""
        return Point2D(x=self.x, y=self.y)

    @property
    def size(self) -> Vector2D:
        return Point2D(x=self.width, y=self.height)

    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width * 0.5,
            y=self.y + self.height * 0.5,
        )

    def intersection(self, other: 'Rectangle') -> Optional['Rectangle']:
        """Overlapping region of two rectangles.

        Args:
            other: Rectangle to intersect with

        Returns:
            The overlap (possibly zero-sized when the rectangles only touch),
            or None when they are apart on either axis.
        """
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)

        if right < left or bottom < top:
            return None

        return Rectangle(x=left, y=top, width=right - left, height=bottom - top)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle touches or overlaps another."""
        return self.intersection(other) is not None

    def move_to(self, x: float, y: float) -> 'Rectangle':
        """Same size, new top-left corner."""
        return Rectangle(x=x, y=y, width=self.width, height=self.height)

    def translate(self, dx: float, dy: float) -> 'Rectangle':
        """Same size, offset by (dx, dy)."""
        return self.move_to(self.x + dx, self.y + dy)

    @property
    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
