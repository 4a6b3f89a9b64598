"""Disjoint-set union that keeps track of whether the graph stays bipartite."""


class BipartiteDSU:
    """Union-find over vertices 1..n with a parity bit per vertex."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self.components = n
        self.bipartite = True
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._toggle = [False] * (n + 1)

    def root(self, x):
        """Return ``(root, parity)`` of ``x``: its set's representative and its colour."""
        if not 0 <= x <= self.n:
            raise ValueError(f"vertex {x} is outside 0..{self.n}")
        parity = self._toggle[x]
        while x != self._parent[x]:
            x = self._parent[x]
            parity ^= self._toggle[x]
        return x, parity

    def merge(self, a, b):
        """Add an edge between ``a`` and ``b``; return True if two sets were joined.

        Once an odd cycle appears the structure stops changing and every
        merge returns False.
        """
        if not self.bipartite:
            return False
        x1, ca = self.root(a)
        x2, cb = self.root(b)
        if x1 == x2:
            if ca == cb:
                self.bipartite = False
            return False
        if self._size[x2] > self._size[x1]:
            x1, x2 = x2, x1
        self._parent[x2] = x1
        self._size[x1] += self._size[x2]
        self._toggle[x2] ^= ca == cb
        self.components -= 1
        return True