"""Convex hulls of integer points: brute force, Graham scan and divide and conquer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from itertools import combinations, pairwise
from typing import Tuple, Union

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane; points order by x, then by y."""

    x: int
    y: int


PointLike = Union[Point, Tuple[int, int]]


def _point(value: PointLike) -> Point:
    return value if isinstance(value, Point) else Point(*value)


def _cross(p: Point, q: Point, r: Point) -> int:
    return (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)


def _squared_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def orientation(p: PointLike, q: PointLike, r: PointLike) -> int:
    """Return COLLINEAR, CLOCKWISE or COUNTERCLOCKWISE for the turn p -> q -> r."""
    value = _cross(_point(p), _point(q), _point(r))
    if value == 0:
        return COLLINEAR
    return CLOCKWISE if value > 0 else COUNTERCLOCKWISE


def convex_hull_brute_force(points: Iterable[PointLike]) -> list[Point]:
    """Return every point that ends a hull edge, sorted by x then y.

    A pair is a hull edge when no other point lies strictly on each side of it,
    so points lying on a hull edge are included too.
    """
    pts = [_point(p) for p in points]
    if len(pts) < 3:
        raise ValueError("convex hull not possible with fewer than three points")
    hull: set[Point] = set()
    for (i, a), (j, b) in combinations(enumerate(pts), 2):
        sides = {orientation(a, b, c) for k, c in enumerate(pts) if k not in (i, j)}
        if not (CLOCKWISE in sides and COUNTERCLOCKWISE in sides):
            hull.update((a, b))
    return sorted(hull)


def graham_scan(points: Iterable[PointLike]) -> list[Point]:
    """Return the hull vertices in clockwise order, ending with the lowest (then leftmost) point."""
    pts = [_point(p) for p in points]
    if not pts:
        raise ValueError("convex hull not possible without points")
    anchor = min(pts, key=lambda p: (p.y, p.x))
    index = pts.index(anchor)
    rest = pts[:index] + pts[index + 1:]

    def by_angle(a: Point, b: Point) -> int:
        turn = orientation(anchor, a, b)
        if turn == COLLINEAR:
            da, db = _squared_distance(anchor, a), _squared_distance(anchor, b)
            return (da > db) - (da < db)
        return -1 if turn == COUNTERCLOCKWISE else 1

    rest.sort(key=cmp_to_key(by_angle))
    # Of points at the same angle from the anchor keep only the farthest.
    candidates = [
        p for p, following in pairwise([*rest, None])
        if following is None or orientation(anchor, p, following) != COLLINEAR
    ]
    if len(candidates) + 1 < 3:
        raise ValueError("convex hull not possible: points are collinear")

    stack = [anchor, candidates[0], candidates[1]]
    for p in candidates[2:]:
        while len(stack) > 1 and orientation(stack[-2], stack[-1], p) != COUNTERCLOCKWISE:
            stack.pop()
        stack.append(p)
    return stack[::-1]


def merge_hulls(left: Sequence[PointLike], right: Sequence[PointLike]) -> list[Point]:
    """Join two hulls, the left wholly left of the right, along their upper and lower tangents."""
    lhs = [_point(p) for p in left]
    rhs = [_point(p) for p in right]
    if not lhs or not rhs:
        raise ValueError("both hulls must hold at least one point")
    n1, n2 = len(lhs), len(rhs)
    rightmost = max(range(n1), key=lambda k: (lhs[k].x, -k))
    leftmost = min(range(n2), key=lambda k: (rhs[k].x, k))

    upper_left, upper_right = rightmost, leftmost
    done = False
    while not done:
        done = True
        while orientation(rhs[upper_right], lhs[upper_left], lhs[(upper_left + 1) % n1]) == COUNTERCLOCKWISE:
            upper_left = (upper_left + 1) % n1
        while orientation(lhs[upper_left], rhs[upper_right], rhs[(upper_right - 1) % n2]) == CLOCKWISE:
            upper_right = (upper_right - 1) % n2
            done = False

    lower_left, lower_right = rightmost, leftmost
    done = False
    while not done:
        done = True
        while orientation(lhs[lower_left], rhs[lower_right], rhs[(lower_right + 1) % n2]) == COUNTERCLOCKWISE:
            lower_right = (lower_right + 1) % n2
        while orientation(rhs[lower_right], lhs[lower_left], lhs[(lower_left - 1) % n1]) == CLOCKWISE:
            lower_left = (lower_left - 1) % n1
            done = False

    merged = [lhs[lower_left]]
    index = lower_left
    while index != upper_left:
        index = (index + 1) % n1
        merged.append(lhs[index])
    merged.append(rhs[upper_right])
    index = upper_right
    while index != lower_right:
        index = (index + 1) % n2
        merged.append(rhs[index])
    return merged


def _divide(points: list[Point]) -> list[Point]:
    if len(points) <= 3:
        hull = list(points)
        if len(hull) == 3 and orientation(*hull) == COLLINEAR:
            del hull[1]
        return hull
    middle = (len(points) - 1) // 2
    return merge_hulls(_divide(points[: middle + 1]), _divide(points[middle + 1:]))


def convex_hull_divide_and_conquer(points: Iterable[PointLike]) -> list[Point]:
    """Hull by sorting the points on x and merging the hulls of the two halves."""
    return _divide(sorted(_point(p) for p in points))