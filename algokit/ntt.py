"""Number-theoretic transforms and exact modular polynomial multiplication."""

MOD = 998244353

MOD0 = 1484783617
ROOT0 = 270076864
IROOT0 = 1400602088

MOD1 = 1572864001
ROOT1 = 682289494
IROOT1 = 1238769373

ROOT_PW = 1 << 22

_INV_MOD0_MOD1 = pow(MOD0, -1, MOD1)
_INV_MOD1_MOD0 = pow(MOD1, -1, MOD0)


def mod_inverse(a, mod):
    """Return the inverse of ``a`` modulo ``mod``; raise ValueError if none exists."""
    a %= mod
    b, u, v = mod, 0, 1
    while a:
        t = b // a
        b -= t * a
        a, b = b, a
        u -= t * v
        u, v = v, u
    if b != 1:
        raise ValueError(f"{a} has no inverse modulo {mod}")
    return u % mod


class NumberTheoreticTransform:
    """Radix-2 NTT over the integers modulo a prime ``mod``."""

    def __init__(self, mod):
        if mod < 3:
            raise ValueError("modulus must be an odd prime")
        self.mod = mod
        tmp = mod - 1
        max_base = 0
        while tmp % 2 == 0:
            tmp //= 2
            max_base += 1
        if max_base == 0:
            raise ValueError("modulus must be an odd prime")
        self.max_base = max_base
        root = next(
            (
                r
                for r in range(2, mod)
                if pow(r, 1 << max_base, mod) == 1 and pow(r, 1 << (max_base - 1), mod) != 1
            ),
            None,
        )
        if root is None:
            raise ValueError(f"no root of unity of order 2^{max_base} modulo {mod}")
        self.root = root
        self._base = 1
        self._roots = [0, 1]
        self._rev = [0, 1]

    def _ensure_base(self, nbase):
        if nbase <= self._base:
            return
        if nbase > self.max_base:
            raise ValueError(f"transform of size 2^{nbase} is not supported modulo {self.mod}")
        size = 1 << nbase
        rev = [0] * size
        for i in range(1, size):
            rev[i] = (rev[i >> 1] >> 1) | ((i & 1) << (nbase - 1))
        self._rev = rev
        roots = self._roots + [0] * (size - len(self._roots))
        while self._base < nbase:
            z = pow(self.root, 1 << (self.max_base - 1 - self._base), self.mod)
            for i in range(1 << (self._base - 1), 1 << self._base):
                roots[i << 1] = roots[i]
                roots[(i << 1) + 1] = roots[i] * z % self.mod
            self._base += 1
        self._roots = roots

    def transform(self, values):
        """Return the forward transform of ``values`` (length a power of two)."""
        mod = self.mod
        a = [v % mod for v in values]
        n = len(a)
        if n < 1 or n & (n - 1):
            raise ValueError(f"length must be a power of two, got {n}")
        zeros = n.bit_length() - 1
        self._ensure_base(zeros)
        shift = self._base - zeros
        rev = self._rev
        for i in range(n):
            r = rev[i] >> shift
            if i < r:
                a[i], a[r] = a[r], a[i]
        roots = self._roots
        k = 1
        while k < n:
            for start in range(0, n, 2 * k):
                for j in range(k):
                    x = a[start + j]
                    y = a[start + j + k] * roots[j + k] % mod
                    a[start + j] = (x + y) % mod
                    a[start + j + k] = (x - y) % mod
            k <<= 1
        return a

    def _multiply(self, a, b, same):
        if not a or not b:
            return []
        need = len(a) + len(b) - 1
        nbase = (need - 1).bit_length()
        self._ensure_base(nbase)
        size = 1 << nbase
        fa = self.transform(list(a) + [0] * (size - len(a)))
        fb = fa if same else self.transform(list(b) + [0] * (size - len(b)))
        inv_size = mod_inverse(size, self.mod)
        product = [x * y % self.mod * inv_size % self.mod for x, y in zip(fa, fb)]
        product[1:] = product[:0:-1]
        return self.transform(product)[:need]

    def multiply(self, a, b):
        """Return the product of two coefficient lists modulo ``mod``."""
        return self._multiply(a, b, False)

    def square(self, a):
        """Return the square of a coefficient list modulo ``mod``."""
        return self._multiply(a, a, True)


_DEFAULT = NumberTheoreticTransform(MOD)


def multiply(a, b):
    """Return the product of two coefficient lists modulo 998244353."""
    if not a or not b:
        return []
    if min(len(a), len(b)) <= 5:
        result = [0] * (len(a) + len(b) - 1)
        for i, x in enumerate(a):
            for j, y in enumerate(b):
                result[i + j] = (result[i + j] + x * y) % MOD
        return result
    return _DEFAULT.multiply(a, b)


def _crt_transform(values, invert, mod, root, root_inv):
    a = list(values)
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    length = 2
    while length <= n:
        wlen = pow(root_inv if invert else root, ROOT_PW // length, mod)
        half = length // 2
        for start in range(0, n, length):
            w = 1
            for k in range(start, start + half):
                u = a[k]
                v = a[k + half] * w % mod
                a[k] = (u + v) % mod
                a[k + half] = (u - v) % mod
                w = w * wlen % mod
        length <<= 1
    if invert:
        n_inv = pow(n, mod - 2, mod)
        a = [x * n_inv % mod for x in a]
    return a


def _convolve(a, b, mod, root, root_inv):
    fa = _crt_transform(a, False, mod, root, root_inv)
    fb = _crt_transform(b, False, mod, root, root_inv)
    return _crt_transform([x * y % mod for x, y in zip(fa, fb)], True, mod, root, root_inv)


def multiply_crt(a, b, mod=100003):
    """Return the product of two coefficient lists modulo an arbitrary ``mod``.

    Two NTT primes are combined by the Chinese remainder theorem, so the
    result is exact while every true coefficient stays below their product.
    """
    if mod < 1:
        raise ValueError("modulus must be positive")
    if not a or not b:
        return []
    need = len(a) + len(b) - 1
    n = 1 << (len(a) + len(b) - 1).bit_length()
    if n > ROOT_PW:
        raise ValueError("input is too long")
    pa = [v % mod for v in a] + [0] * (n - len(a))
    pb = [v % mod for v in b] + [0] * (n - len(b))
    c0 = _convolve(pa, pb, MOD0, ROOT0, IROOT0)
    c1 = _convolve(pa, pb, MOD1, ROOT1, IROOT1)
    both = MOD0 * MOD1
    result = []
    for r0, r1 in zip(c0[:need], c1[:need]):
        t = (r0 * _INV_MOD1_MOD0 % MOD0 * MOD1 + r1 * _INV_MOD0_MOD1 % MOD1 * MOD0) % both
        result.append(t % mod)
    return result