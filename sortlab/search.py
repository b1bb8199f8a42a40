"""Binary search over sorted sequences, counting the comparisons made."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SearchResult:
    """The positions where a key was found and the number of comparisons spent."""

    indexes: list[int] = field(default_factory=list)
    comparisons: int = 0

    @property
    def found(self):
        """True when at least one position holds the key."""
        return bool(self.indexes)

    @property
    def index(self):
        """The first position found, or -1 when the key is absent."""
        return self.indexes[0] if self.indexes else -1


def bsearch1(values, key):
    """Find one position of key, stopping as soon as the middle element matches."""
    comparisons = 0
    left, right = 0, len(values) - 1
    while left <= right:
        middle = (left + right) // 2
        comparisons += 1
        if values[middle] == key:
            return SearchResult([middle], comparisons)
        comparisons += 1
        if values[middle] < key:
            left = middle + 1
        else:
            right = middle - 1
    return SearchResult([], comparisons)


def _leftmost(values, key):
    comparisons = 0
    left, right = 0, len(values) - 1
    while left < right:
        middle = (left + right) // 2
        comparisons += 1
        if values[middle] < key:
            left = middle + 1
        else:
            right = middle
    return right, comparisons


def bsearch2(values, key):
    """Find the leftmost position of key, testing for equality only at the end."""
    if not values:
        return SearchResult()
    position, comparisons = _leftmost(values, key)
    comparisons += 1
    if values[position] == key:
        return SearchResult([position], comparisons)
    return SearchResult([], comparisons)


def bsearch_all1(values, key):
    """Find every position of key by repeating the first search with found positions left out."""
    excluded: set[int] = set()
    comparisons = 0
    while True:
        remaining = [i for i in range(len(values)) if i not in excluded]
        result = bsearch1([values[i] for i in remaining], key)
        comparisons += result.comparisons
        if not result.found:
            break
        excluded.add(remaining[result.index])
    return SearchResult(sorted(excluded), comparisons)


def bsearch_all2(values, key):
    """Find every position of key: locate the leftmost one, then scan to the right."""
    if not values:
        return SearchResult()
    position, comparisons = _leftmost(values, key)
    comparisons += 1
    found = []
    if values[position] == key:
        found.append(position)
        position += 1
        while position < len(values):
            comparisons += 1
            if values[position] != key:
                break
            found.append(position)
            position += 1
    return SearchResult(found, comparisons)