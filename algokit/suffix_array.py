"""Suffix array by prefix doubling, Kasai's LCP array and a sparse table over it."""


class SparseTable:
    """Idempotent range minimum (or maximum) queries in constant time."""

    def __init__(self, values=(), maximum=False):
        self.maximum = maximum
        self._better = max if maximum else min
        row = list(values)
        self.n = len(row)
        self._levels = [row] if row else []
        k = 1
        while (1 << k) <= self.n:
            prev = self._levels[-1]
            half = 1 << (k - 1)
            self._levels.append([self._better(x, y) for x, y in zip(prev, prev[half:])])
            k += 1

    def query(self, a, b):
        """Return the best value among positions ``a`` to ``b`` inclusive."""
        if not 0 <= a <= b < self.n:
            raise IndexError(f"range [{a}, {b}] is outside 0..{self.n - 1}")
        level = (b - a + 1).bit_length() - 1
        row = self._levels[level]
        return self._better(row[a], row[b + 1 - (1 << level)])


class SuffixArray:
    """Sorted suffixes of a string or integer sequence.

    ``order`` lists suffix start positions in sorted order, ``rank`` is its
    inverse and ``lcp_array[i]`` is the common prefix length of the suffixes
    at ``order[i]`` and ``order[i + 1]``.
    """

    def __init__(self, text, need_rmq=True, alphabet=256):
        self.text = [ord(ch) for ch in text] if isinstance(text, str) else list(text)
        self.alphabet = alphabet
        self.n = len(self.text)
        self.order = self._build()
        self.rank = [0] * self.n
        for position, start in enumerate(self.order):
            self.rank[start] = position
        self.lcp_array = []
        self._table = None
        if need_rmq and self.n > 1:
            self.lcp_array = self._kasai()
            self._table = SparseTable(self.lcp_array)

    def _initial_order(self):
        symbols, n = self.text, self.n
        if self.alphabet <= 256:
            buckets = [[] for _ in range(self.alphabet)]
            for i, symbol in enumerate(symbols):
                if not 0 <= symbol < self.alphabet:
                    raise ValueError(f"symbol {symbol} is outside 0..{self.alphabet - 1}")
                buckets[symbol].append(i)
            return [n] + [i for bucket in buckets for i in bucket], -1
        sentinel = min(symbols, default=0) - 1
        return sorted(range(n + 1), key=lambda i: symbols[i] if i < n else sentinel), sentinel

    def _build(self):
        m = self.n + 1
        order, sentinel = self._initial_order()
        seq = self.text + [sentinel]
        classes = [0] * m
        count = 1
        for prev, cur in zip(order, order[1:]):
            if seq[cur] != seq[prev]:
                count += 1
            classes[cur] = count - 1

        length = 1
        while length < m and count < m:
            keys = [(classes[i], classes[(i + length) % m]) for i in range(m)]
            order.sort(key=keys.__getitem__)
            fresh = [0] * m
            count = 1
            for prev, cur in zip(order, order[1:]):
                if keys[cur] != keys[prev]:
                    count += 1
                fresh[cur] = count - 1
            classes = fresh
            length <<= 1
        return order[1:]

    def _kasai(self):
        n, text, rank, order = self.n, self.text, self.rank, self.order
        lcp = [0] * (n - 1)
        k = 0
        for i in range(n):
            if rank[i] == n - 1:
                k = 0
                continue
            j = order[rank[i] + 1]
            while i + k < n and j + k < n and text[i + k] == text[j + k]:
                k += 1
            lcp[rank[i]] = k
            if k:
                k -= 1
        return lcp

    def _check(self, index):
        if not 0 <= index < self.n:
            raise IndexError(f"position {index} is outside 0..{self.n - 1}")

    def lcp(self, a, b):
        """Return the length of the common prefix of the suffixes at ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        if a == b:
            return self.n - a
        if self._table is None:
            raise ValueError("suffix array was built without LCP support")
        ra, rb = sorted((self.rank[a], self.rank[b]))
        return self._table.query(ra, rb - 1)

    def compare(self, a, b, length):
        """Compare the substrings of ``length`` starting at ``a`` and ``b``: -1, 0 or 1."""
        match = self.lcp(a, b)
        if match >= length:
            return 0
        if a + match >= self.n or b + match >= self.n:
            return -1 if a > b else 1
        return 1 if self.text[a + match] > self.text[b + match] else -1