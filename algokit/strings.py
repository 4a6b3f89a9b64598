"""Prefix function (Knuth-Morris-Pratt) and Manacher's palindrome radii."""


def prefix_function(s):
    """Return, for every prefix of ``s``, the length of its longest proper border."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def manachers(s):
    """Return ``(odd, even)`` palindrome radii for every position of ``s``.

    ``odd[i]`` is the number of odd-length palindromes centred on ``s[i]``;
    ``even[i]`` is the number of even-length palindromes whose right centre is ``s[i]``.
    """
    n = len(s)
    odd = [0] * n
    lo, hi = 0, -1
    for i in range(n):
        k = 1 if i > hi else min(odd[lo + hi - i], hi - i)
        while i - k >= 0 and i + k < n and s[i - k] == s[i + k]:
            k += 1
        odd[i] = k
        k -= 1
        if i + k > hi:
            lo, hi = i - k, i + k

    even = [0] * n
    lo, hi = 0, -1
    for i in range(n):
        k = 0 if i > hi else min(even[lo + hi - i + 1], hi - i + 1)
        while i - k - 1 >= 0 and i + k < n and s[i - k - 1] == s[i + k]:
            k += 1
        even[i] = k
        k -= 1
        if i + k > hi:
            lo, hi = i - k - 1, i + k
    return odd, even