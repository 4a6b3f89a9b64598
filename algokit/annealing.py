"""Simulated annealing that places disjoint rectangles on a 0/1 grid.

Each rectangle scores the absolute difference between the ones and zeros
it covers; the search looks for a set of disjoint rectangles of high total score.
"""

import argparse
import math
import random
import sys
import time
from dataclasses import dataclass

ITERATIONS = 100
MAX_TEMPERATURE = 1.0
MIN_TEMPERATURE = 1e-4


@dataclass(frozen=True)
class Rect:
    """A rectangle of grid cells, rows ``i1..i2`` and columns ``j1..j2``, 1-based inclusive."""

    i1: int
    j1: int
    i2: int
    j2: int

    def area(self):
        return (self.i2 - self.i1 + 1) * (self.j2 - self.j1 + 1)

    @property
    def shape(self):
        return self.i2 - self.i1 + 1, self.j2 - self.j1 + 1

    def overlaps(self, other):
        rows_apart = self.i2 < other.i1 or other.i2 < self.i1
        cols_apart = self.j2 < other.j1 or other.j2 < self.j1
        return not (rows_apart or cols_apart)


def _prefix_counts(rows, value):
    n = len(rows)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i, row in enumerate(rows, start=1):
        for j, cell in enumerate(row, start=1):
            table[i][j] = (
                table[i - 1][j] + table[i][j - 1] - table[i - 1][j - 1] + (cell == value)
            )
    return table


def _count(table, rect):
    return (
        table[rect.i2][rect.j2]
        - table[rect.i1 - 1][rect.j2]
        - table[rect.i2][rect.j1 - 1]
        + table[rect.i1 - 1][rect.j1 - 1]
    )


def solve_grid(grid, timeout=1.8, seed=None):
    """Anneal for ``timeout`` seconds of CPU time and return the chosen rectangles.

    The grid must be square with side at least 10.
    """
    rows = [list(row) for row in grid]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("grid must be square")
    if n < 10:
        raise ValueError("grid side must be at least 10")

    ones = _prefix_counts(rows, 1)
    zeros = _prefix_counts(rows, 0)

    def score(rect):
        return abs(_count(ones, rect) - _count(zeros, rect))

    rng = random.Random(seed)

    def random_rect():
        height = rng.randrange(n // 10) + 1
        width = rng.randrange(n // 8) + 1
        top = rng.randrange(n - height) + 1
        left = rng.randrange(n - width) + 1
        return Rect(top, left, top + height - 1, left + width - 1)

    answer = []
    last_by_shape = {}
    current = 0
    start = time.process_time()
    while (elapsed := time.process_time() - start) < timeout:
        temperature = (1.0 - elapsed / timeout) * (
            MAX_TEMPERATURE - MIN_TEMPERATURE
        ) + MIN_TEMPERATURE
        for _ in range(ITERATIONS):
            candidate = random_rect()
            replaced = last_by_shape.get(candidate.shape)
            kept = [r for r in answer if r != replaced and not r.overlaps(candidate)]
            kept.append(candidate)
            new_score = sum(map(score, kept))
            delta = new_score - current
            if delta >= 0 or math.exp(delta / temperature) > rng.random():
                last_by_shape[candidate.shape] = candidate
                answer = kept
                current = new_score
    return answer


def _read_grid(text):
    tokens = text.split()
    if not tokens:
        raise ValueError("missing grid size")
    n = int(tokens[0])
    cells = [int(token) for token in tokens[1 : 1 + n * n]]
    if len(cells) != n * n:
        raise ValueError(f"expected {n * n} cells")
    return [cells[i * n : (i + 1) * n] for i in range(n)]


def main(argv=None):
    """Read a grid size and its 0/1 cells, anneal, and print the rectangles found."""
    parser = argparse.ArgumentParser(description="Place disjoint rectangles on a 0/1 grid.")
    parser.add_argument("input", nargs="?", help="file to read instead of standard input")
    parser.add_argument("--timeout", type=float, default=1.8, help="CPU seconds to search")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    rects = solve_grid(_read_grid(text), timeout=args.timeout, seed=args.seed)
    print(len(rects))
    for rect in rects:
        print(rect.i1, rect.j1, rect.i2, rect.j2)
    return 0


if __name__ == "__main__":
    sys.exit(main())