"""Two-phase simplex solver for linear programs in standard inequality form."""

import math

EPS = 1e-9


class LPSolver:
    """Maximise c.x subject to A x <= b and x >= 0."""

    def __init__(self, a, b, c):
        self.m = len(b)
        self.n = len(c)
        self._a = [[float(v) for v in row] for row in a]
        self._b = [float(v) for v in b]
        self._c = [float(v) for v in c]
        if len(self._a) != self.m or any(len(row) != self.n for row in self._a):
            raise ValueError("constraint matrix shape does not match b and c")

    def _reset(self):
        m, n = self.m, self.n
        self._d = [row + [-1.0, bi] for row, bi in zip(self._a, self._b)]
        self._d.append([-cj for cj in self._c] + [0.0, 0.0])
        phase_one = [0.0] * (n + 2)
        phase_one[n] = 1.0
        self._d.append(phase_one)
        self._basic = list(range(n, n + m))
        self._nonbasic = list(range(n)) + [-1]

    def _pivot(self, r, s):
        d = self._d
        inv = 1.0 / d[r][s]
        pivot_row = d[r]
        width = self.n + 2
        for i, row in enumerate(d):
            if i == r:
                continue
            factor = row[s]
            for j in range(width):
                if j != s:
                    row[j] -= pivot_row[j] * factor * inv
        for j in range(width):
            if j != s:
                pivot_row[j] *= inv
        for i, row in enumerate(d):
            if i != r:
                row[s] *= -inv
        pivot_row[s] = inv
        self._basic[r], self._nonbasic[s] = self._nonbasic[s], self._basic[r]

    def _entering(self, row, skip_artificial):
        nonbasic = self._nonbasic
        s = -1
        for j in range(self.n + 1):
            if skip_artificial and nonbasic[j] == -1:
                continue
            if s == -1 or row[j] < row[s] or (row[j] == row[s] and nonbasic[j] < nonbasic[s]):
                s = j
        return s

    def _simplex(self, phase):
        d, m, n = self._d, self.m, self.n
        x = m + 1 if phase == 1 else m
        while True:
            s = self._entering(d[x], phase == 2)
            if d[x][s] > -EPS:
                return True
            r = -1
            for i in range(m):
                if d[i][s] < EPS:
                    continue
                if r == -1:
                    r = i
                    continue
                ratio_i = d[i][n + 1] / d[i][s]
                ratio_r = d[r][n + 1] / d[r][s]
                if ratio_i < ratio_r or (ratio_i == ratio_r and self._basic[i] < self._basic[r]):
                    r = i
            if r == -1:
                return False
            self._pivot(r, s)

    def solve(self):
        """Return ``(value, x)``.

        The value is -inf when infeasible and inf when unbounded; ``x`` is then None.
        """
        self._reset()
        d, m, n = self._d, self.m, self.n
        if m:
            r = min(range(m), key=lambda i: d[i][n + 1])
            if d[r][n + 1] < -EPS:
                self._pivot(r, n)
                if not self._simplex(1) or d[m + 1][n + 1] < -EPS:
                    return -math.inf, None
                for i in range(m):
                    if self._basic[i] == -1:
                        self._pivot(i, self._entering(d[i], False))
        if not self._simplex(2):
            return math.inf, None
        x = [0.0] * n
        for basic, row in zip(self._basic, d):
            if 0 <= basic < n:
                x[basic] = row[n + 1]
        return d[m][n + 1], x