from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

INF = None  # coordinate value for "at infinity"


@dataclass(frozen=True)
class Point:
    """A point of the projective plane; a None coordinate stands for infinity."""
    x: Optional[int]
    y: Optional[int]

    @property
    def kind(self) -> str:
        if self.x is None:
            return 'infinity'
        if self.y is None:
            return 'slope'
        return 'affine'

    def pretty(self) -> str:
        x = 'inf' if self.x is None else str(self.x)
        y = 'inf' if self.y is None else str(self.y)
        return f"({x},{y})"


def plane_size(order: int) -> int:
    """Number of points (and of lines) in a projective plane of this order."""
    return order * order + order + 1


def affine_index(order: int, x: int, y: int) -> int:
    return x * order + y


def slope_index(order: int, m: int) -> int:
    return order * order + m


def infinity_index(order: int) -> int:
    return order * order + order


def point_index(point: Point, order: int) -> int:
    """Closed-form index of a point; matches the position in enumerate_points()."""
    if point.x is None:
        if point.y is not None:
            raise ValueError(f'Not a point of the plane: {point.pretty()}')
        return infinity_index(order)
    if not 0 <= point.x < order:
        raise ValueError(f'Coordinate out of range for order {order}: {point.pretty()}')
    if point.y is None:
        return slope_index(order, point.x)
    if not 0 <= point.y < order:
        raise ValueError(f'Coordinate out of range for order {order}: {point.pretty()}')
    return affine_index(order, point.x, point.y)


def point_at(index: int, order: int) -> Point:
    """Inverse of point_index()."""
    q2 = order * order
    if index < 0 or index >= plane_size(order):
        raise ValueError(f'Point index {index} out of range for order {order}')
    if index < q2:
        return Point(index // order, index % order)
    if index < q2 + order:
        return Point(index - q2, INF)
    return Point(INF, INF)


def enumerate_points(order: int) -> Iterator[Point]:
    """Affine points row-major, then one point per slope, then (inf, inf)."""
    for x in range(order):
        for y in range(order):
            yield Point(x, y)
    for m in range(order):
        yield Point(m, INF)
    yield Point(INF, INF)
