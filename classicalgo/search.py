"""Search problems: the sliding-tile puzzle, Rabin-Karp matching and subset sums."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import count

Board = tuple[tuple[int, ...], ...]

GOAL: Board = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (13, 14, 15, 0),
)

# left, down, right, up
_MOVES = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class PuzzleSolution:
    """The board reached and the number of moves that reached it."""

    board: Board
    steps: int


def _freeze(board: Iterable[Iterable[int]]) -> Board:
    return tuple(tuple(row) for row in board)


def misplaced_tiles(board: Sequence[Sequence[int]], goal: Sequence[Sequence[int]] = GOAL) -> int:
    """Count the non-blank tiles that are not where the goal has them."""
    return sum(
        1
        for row, goal_row in zip(board, goal)
        for tile, wanted in zip(row, goal_row)
        if tile != 0 and tile != wanted
    )


def _blank(board: Board) -> tuple[int, int]:
    for x, row in enumerate(board):
        for y, tile in enumerate(row):
            if tile == 0:
                return x, y
    raise ValueError("board has no blank")


def _permutation_parity(permutation: list[int]) -> int:
    seen = [False] * len(permutation)
    cycles = 0
    for start in range(len(permutation)):
        if seen[start]:
            continue
        cycles += 1
        position = start
        while not seen[position]:
            seen[position] = True
            position = permutation[position]
    return (len(permutation) - cycles) % 2


def _validate(start: Board, goal: Board) -> None:
    size = len(start)
    if size == 0 or any(len(row) != size for row in start):
        raise ValueError("board must be square")
    if len(goal) != size or any(len(row) != size for row in goal):
        raise ValueError("goal must have the same shape as the board")
    start_tiles = [tile for row in start for tile in row]
    goal_tiles = [tile for row in goal for tile in row]
    if sorted(start_tiles) != sorted(goal_tiles) or len(set(goal_tiles)) != len(goal_tiles):
        raise ValueError("board and goal must hold the same distinct tiles")
    if 0 not in goal_tiles:
        raise ValueError("board must hold a blank (0)")
    target = {tile: index for index, tile in enumerate(goal_tiles)}
    parity = _permutation_parity([target[tile] for tile in start_tiles])
    (sx, sy), (gx, gy) = _blank(start), _blank(goal)
    if parity != (abs(sx - gx) + abs(sy - gy)) % 2:
        raise ValueError("puzzle has no solution")


def _slide(board: Board, blank: tuple[int, int], target: tuple[int, int]) -> Board:
    rows = [list(row) for row in board]
    (bx, by), (tx, ty) = blank, target
    rows[bx][by], rows[tx][ty] = rows[tx][ty], rows[bx][by]
    return _freeze(rows)


def solve_puzzle(start: Sequence[Sequence[int]], goal: Sequence[Sequence[int]] = GOAL) -> PuzzleSolution:
    """Solve the sliding-tile puzzle by A* search on moves plus misplaced tiles."""
    start_board, goal_board = _freeze(start), _freeze(goal)
    _validate(start_board, goal_board)
    size = len(start_board)
    order = count()
    heap = [(misplaced_tiles(start_board, goal_board), next(order), 0, start_board, _blank(start_board))]
    best = {start_board: 0}
    while heap:
        _, _, moves, board, (x, y) = heapq.heappop(heap)
        if misplaced_tiles(board, goal_board) == 0:
            return PuzzleSolution(board, moves)
        if best.get(board, math.inf) < moves:
            continue
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size:
                following = _slide(board, (x, y), (nx, ny))
                cost = moves + 1
                if cost < best.get(following, math.inf):
                    best[following] = cost
                    estimate = cost + misplaced_tiles(following, goal_board)
                    heapq.heappush(heap, (estimate, next(order), cost, following, (nx, ny)))
    raise ValueError("puzzle has no solution")


def rabin_karp(text: str, pattern: str, modulus: int = 2**31 - 1) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, using a rolling hash."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    base = 256
    high = pow(base, m - 1, modulus)
    pattern_hash = window_hash = 0
    for pc, tc in zip(pattern, text):
        pattern_hash = (pattern_hash * base + ord(pc)) % modulus
        window_hash = (window_hash * base + ord(tc)) % modulus

    matches = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i:i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (base * (window_hash - ord(text[i]) * high) + ord(text[i + m])) % modulus
    return matches


def _subsets(items: list[int], target: int, index: int, total: int,
             remaining: int, chosen: list[int]) -> Iterator[list[int]]:
    if total == target:
        yield list(chosen)
    if index == len(items):
        return
    value = items[index]
    if total + value > target or total + remaining < target:
        return
    chosen.append(value)
    yield from _subsets(items, target, index + 1, total + value, remaining - value, chosen)
    chosen.pop()
    yield from _subsets(items, target, index + 1, total, remaining - value, chosen)


def subsets_with_sum(values: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield the subsets of non-negative ``values`` adding up to ``target``, in ascending order."""
    items = sorted(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    return _subsets(items, target, 0, 0, sum(items), [])