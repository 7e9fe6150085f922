"""String problems: dictionary word counting, letter profiles, palindromes, matching."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

MAX_WORD_LENGTH = 20
DEFAULT_MATCH_LIMIT = 1000


def count_occurrences(text: str, words: Sequence[str]) -> list[int]:
    """Count overlapping occurrences of each word in ``text``.

    Only words of at most ``MAX_WORD_LENGTH`` characters are searched for;
    longer words and the empty word always count zero.
    """
    wanted = {word for word in words if 0 < len(word) <= MAX_WORD_LENGTH}
    prefixes = {word[:end] for word in wanted for end in range(1, len(word) + 1)}
    counts: Counter[str] = Counter()
    for start in range(len(text)):
        stop = min(len(text), start + MAX_WORD_LENGTH)
        for end in range(start + 1, stop + 1):
            piece = text[start:end]
            if piece not in prefixes:
                break
            if piece in wanted:
                counts[piece] += 1
    return [counts[word] if word in wanted else 0 for word in words]


def _letter_counts(word: str) -> list[int]:
    if any(not ("a" <= ch <= "z") for ch in word):
        raise ValueError(f"only lowercase letters are allowed: {word!r}")
    counts = Counter(word)
    return sorted(counts.get(chr(ord("a") + offset), 0) for offset in range(26))


def same_letter_profile(a: str, b: str) -> bool:
    """Tell whether one word turns into the other by relabelling letters.

    True when the sorted letter frequencies of both words agree.
    """
    return _letter_counts(a) == _letter_counts(b)


def count_palindromes(s: str) -> int:
    """Count the palindromic substrings of ``s`` (by position)."""
    padded = "*" + "".join(ch + "*" for ch in s)
    size = len(padded)
    radius = [0] * size
    best_centre, best_reach = 0, 0
    for centre in range(size):
        r = 0
        if best_centre + best_reach >= centre:
            r = min(radius[2 * best_centre - centre], best_centre + best_reach - centre)
        while (
            centre - r - 1 >= 0
            and centre + r + 1 < size
            and padded[centre - r - 1] == padded[centre + r + 1]
        ):
            r += 1
        radius[centre] = r
        if centre + r > best_centre + best_reach:
            best_centre, best_reach = centre, r
    return sum((r + 1) // 2 for r in radius)


def _prefix_function(pattern: str) -> list[int]:
    pi = [0] * len(pattern)
    for i in range(1, len(pattern)):
        k = pi[i - 1]
        while k and pattern[i] != pattern[k]:
            k = pi[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        pi[i] = k
    return pi


def find_occurrences(
    pattern: str, text: str, limit: int = DEFAULT_MATCH_LIMIT
) -> tuple[int, list[int]]:
    """Find ``pattern`` in ``text``.

    Returns the total number of (overlapping) matches and the zero-based
    start positions of the first ``limit`` of them.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = _prefix_function(pattern)
    size = len(pattern)
    count = 0
    positions: list[int] = []
    matched = 0
    for index, ch in enumerate(text):
        while matched and ch != pattern[matched]:
            matched = pi[matched - 1]
        if ch == pattern[matched]:
            matched += 1
        if matched == size:
            count += 1
            if len(positions) < limit:
                positions.append(index - size + 1)
            matched = pi[matched - 1]
    return count, positions


def _words(lines: Iterable[str]) -> list[str]:
    return [word for line in lines for word in line.split()]