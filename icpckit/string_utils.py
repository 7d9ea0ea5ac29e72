"""Lyndon words, string transformations, similarity measures and validation."""

from __future__ import annotations

import random
import re
import string
from collections.abc import Iterable
from itertools import combinations_with_replacement

_TRIM_CHARS = " \t\n\r"
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_URL_RE = re.compile(r"https?://[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}(/.*)?")
_PAIRS = {")": "(", "]": "[", "}": "{"}


def duval_factorization(s: str) -> list[str]:
    """Factor ``s`` into a non-increasing sequence of Lyndon words."""
    factors = []
    n = len(s)
    i = 0
    while i < n:
        j, k = i + 1, i
        while j < n and s[k] <= s[j]:
            k = i if s[k] < s[j] else k + 1
            j += 1
        while i <= k:
            factors.append(s[i : i + j - k])
            i += j - k
    return factors


def minimal_rotation(s: str) -> str:
    """The lexicographically smallest rotation of ``s``."""
    n = len(s)
    doubled = s + s
    i = answer = 0
    while i < n:
        answer = i
        j, k = i + 1, i
        while j < i + n and doubled[k] <= doubled[j]:
            k = i if doubled[k] < doubled[j] else k + 1
            j += 1
        while i <= k:
            i += j - k
    return doubled[answer : answer + n]


def is_lyndon_word(s: str) -> bool:
    """True if ``s`` is non-empty and strictly smaller than each of its proper rotations."""
    return bool(s) and all(s < s[i:] + s[:i] for i in range(1, len(s)))


def lyndon_words(n: int, alphabet: str) -> list[str]:
    """Lyndon words of length ``n`` whose letters follow the order of ``alphabet``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    candidates = ("".join(chars) for chars in combinations_with_replacement(alphabet, n))
    return [word for word in candidates if is_lyndon_word(word)]


def reverse(s: str) -> str:
    """``s`` read backwards."""
    return s[::-1]


def to_lower(s: str) -> str:
    """``s`` in lower case."""
    return s.lower()


def to_upper(s: str) -> str:
    """``s`` in upper case."""
    return s.upper()


def remove_spaces(s: str) -> str:
    """``s`` without space characters."""
    return s.replace(" ", "")


def remove_char(s: str, c: str) -> str:
    """``s`` without any occurrence of the character ``c``."""
    return s.replace(c, "")


def split(s: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; a trailing empty field is dropped."""
    parts = s.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def join(strings: Iterable[str], delimiter: str) -> str:
    """Concatenate ``strings`` with ``delimiter`` between them."""
    return delimiter.join(strings)


def trim(s: str) -> str:
    """``s`` without leading and trailing spaces, tabs and line breaks."""
    return s.strip(_TRIM_CHARS)


def replace_all(s: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, left to right."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    return s.replace(old, new)


def _check_fill(fill: str) -> None:
    if len(fill) != 1:
        raise ValueError("the fill must be a single character")


def pad_left(s: str, width: int, fill: str = " ") -> str:
    """``s`` padded on the left to ``width`` characters."""
    _check_fill(fill)
    return s.rjust(width, fill)


def pad_right(s: str, width: int, fill: str = " ") -> str:
    """``s`` padded on the right to ``width`` characters."""
    _check_fill(fill)
    return s.ljust(width, fill)


def levenshtein_distance(s1: str, s2: str) -> int:
    """Edit distance with unit-cost insertions, deletions and substitutions."""
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def hamming_distance(s1: str, s2: str) -> int:
    """Number of positions where two equal-length strings differ."""
    if len(s1) != len(s2):
        raise ValueError("strings must have the same length")
    return sum(a != b for a, b in zip(s1, s2))


def jaccard_similarity(s1: str, s2: str) -> float:
    """Size of the shared character set over the size of the combined set."""
    set1, set2 = set(s1), set(s2)
    union = set1 | set2
    if not union:
        return 1.0
    return len(set1 & set2) / len(union)


def longest_common_subsequence(s1: str, s2: str) -> str:
    """One longest common subsequence of ``s1`` and ``s2``."""
    m, n = len(s1), len(s2)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    chars = []
    i, j = m, n
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def longest_common_substring(s1: str, s2: str) -> str:
    """The first longest common substring found scanning ``s1`` left to right."""
    previous = [0] * (len(s2) + 1)
    best_len = end = 0
    for i, c1 in enumerate(s1, 1):
        current = [0] * (len(s2) + 1)
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                current[j] = previous[j - 1] + 1
                if current[j] > best_len:
                    best_len, end = current[j], i
        previous = current
    return s1[end - best_len : end]


def random_string(length: int, charset: str = string.ascii_lowercase) -> str:
    """A random string of ``length`` characters drawn from ``charset``."""
    if length > 0 and not charset:
        raise ValueError("the character set must not be empty")
    return "".join(random.choice(charset) for _ in range(length))


def permutations(s: str) -> list[str]:
    """All distinct permutations of ``s`` in lexicographic order."""
    chars = sorted(s)
    result = []
    while True:
        result.append("".join(chars))
        i = len(chars) - 2
        while i >= 0 and chars[i] >= chars[i + 1]:
            i -= 1
        if i < 0:
            return result
        j = len(chars) - 1
        while chars[j] <= chars[i]:
            j -= 1
        chars[i], chars[j] = chars[j], chars[i]
        chars[i + 1 :] = reversed(chars[i + 1 :])


def substrings(s: str) -> list[str]:
    """Every substring by start position, then by length."""
    n = len(s)
    return [s[i:j] for i in range(n) for j in range(i + 1, n + 1)]


def subsequences(s: str) -> list[str]:
    """Every subsequence, indexed by the bit mask of chosen positions."""
    return [
        "".join(ch for i, ch in enumerate(s) if mask >> i & 1)
        for mask in range(1 << len(s))
    ]


def is_alphabetic(s: str) -> bool:
    """True if every character is an ASCII letter."""
    return all(ch in string.ascii_letters for ch in s)


def is_numeric(s: str) -> bool:
    """True if every character is an ASCII digit."""
    return all(ch in string.digits for ch in s)


def is_alphanumeric(s: str) -> bool:
    """True if every character is an ASCII letter or digit."""
    return all(ch in string.ascii_letters or ch in string.digits for ch in s)


def is_valid_email(s: str) -> bool:
    """True if ``s`` has the shape of an e-mail address."""
    return _EMAIL_RE.fullmatch(s) is not None


def is_valid_url(s: str) -> bool:
    """True if ``s`` has the shape of an http or https URL."""
    return _URL_RE.fullmatch(s) is not None


def is_balanced(s: str) -> bool:
    """True if the brackets ``()[]{}`` in ``s`` are properly nested."""
    stack = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
    return not stack


def border_array(s: str) -> list[int]:
    """Length of the longest proper border of every prefix of ``s``."""
    border = [0] * len(s)
    for i in range(1, len(s)):
        j = border[i - 1]
        while j > 0 and s[i] != s[j]:
            j = border[j - 1]
        if s[i] == s[j]:
            j += 1
        border[i] = j
    return border


def all_periods(s: str) -> list[int]:
    """Periods of ``s`` that divide its length, in increasing order."""
    if not s:
        return []
    border = border_array(s)
    n = len(s)
    periods = []
    b = border[-1]
    while True:
        period = n - b
        if n % period == 0:
            periods.append(period)
        if b == 0:
            return periods
        b = border[b - 1]


def count_distinct_substrings(s: str) -> int:
    """Number of distinct non-empty substrings of ``s``."""
    return len(set(substrings(s)))


def compress(s: str) -> str:
    """Run-length encoding (``aaab`` becomes ``a3b``) if it is shorter, else ``s``."""
    if not s:
        return ""
    pieces = []
    current, count = s[0], 1
    for ch in s[1:]:
        if ch == current:
            count += 1
        else:
            pieces.append(current + (str(count) if count > 1 else ""))
            current, count = ch, 1
    pieces.append(current + (str(count) if count > 1 else ""))
    result = "".join(pieces)
    return result if len(result) < len(s) else s


def decompress(s: str) -> str:
    """Expand run-length encoding: each character is repeated by the digits after it."""
    pieces = []
    i = 0
    while i < len(s):
        ch = s[i]
        i += 1
        j = i
        while j < len(s) and s[j] in string.digits:
            j += 1
        count = int(s[i:j]) if j > i else 1
        pieces.append(ch * count)
        i = j
    return "".join(pieces)