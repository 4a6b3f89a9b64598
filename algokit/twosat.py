"""2-SAT solver based on strongly connected components of the implication graph."""


class TwoSat:
    """Satisfiability of a conjunction of two-literal clauses.

    Variable ``i`` has the literal ``2 * i`` for "x_i is true" and
    ``2 * i + 1`` for "x_i is false"; ``lit ^ 1`` negates a literal.
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError("number of variables must be non-negative")
        self.n = n
        self._adj = [[] for _ in range(2 * n)]
        self._radj = [[] for _ in range(2 * n)]

    def _check(self, literal):
        if not 0 <= literal < 2 * self.n:
            raise ValueError(f"literal {literal} is out of range for {self.n} variables")

    def add_implication(self, a, b):
        """Add the clause "a implies b"."""
        self._check(a)
        self._check(b)
        self._adj[a].append(b)
        self._radj[b].append(a)

    def add_or(self, a, b):
        """Add the clause "a or b"."""
        self.add_implication(a ^ 1, b)
        self.add_implication(b ^ 1, a)

    def add_xor(self, a, b):
        """Add the clause "exactly one of a and b"."""
        self.add_implication(a, b ^ 1)
        self.add_implication(b, a ^ 1)
        self.add_implication(a ^ 1, b)
        self.add_implication(b ^ 1, a)

    def force_true(self, a):
        """Require literal ``a`` to hold."""
        self.add_implication(a ^ 1, a)

    def _finish_order(self):
        size = 2 * self.n
        seen = [False] * size
        order = []
        for start in range(size):
            if seen[start]:
                continue
            seen[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                v, neighbours = stack[-1]
                for w in neighbours:
                    if not seen[w]:
                        seen[w] = True
                        stack.append((w, iter(self._adj[w])))
                        break
                else:
                    stack.pop()
                    order.append(v)
        return order

    def _components(self):
        comp = [0] * (2 * self.n)
        label = 0
        for v in reversed(self._finish_order()):
            if comp[v]:
                continue
            label += 1
            comp[v] = label
            stack = [v]
            while stack:
                u = stack.pop()
                for w in self._radj[u]:
                    if not comp[w]:
                        comp[w] = label
                        stack.append(w)
        return comp

    def solve(self):
        """Return a satisfying assignment as a list of booleans, or None if there is none."""
        comp = self._components()
        assignment = []
        for i in range(self.n):
            positive, negative = comp[2 * i], comp[2 * i + 1]
            if positive == negative:
                return None
            assignment.append(positive > negative)
        return assignment