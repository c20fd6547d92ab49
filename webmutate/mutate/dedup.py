from __future__ import annotations

from typing import Iterable, Iterator, Set

from ..vectors.base import CanonicalKey, InputVector


def dedup_key(vector: InputVector) -> CanonicalKey:
    """
    Identity of a vector as it would be transmitted: target, method and the
    full field mapping. Mutation bookkeeping (seed, affected input name,
    format) is not part of it.
    """
    return vector.canonical_key()


class DedupSet:
    """
    Membership set over generated vectors, keyed by ``dedup_key``.
    Not safe for concurrent writers; one instance per generation call.
    """

    def __init__(self, vectors: Iterable[InputVector] = ()) -> None:
        self._keys: Set[CanonicalKey] = set()
        for v in vectors:
            self.add(v)

    def add(self, vector: InputVector) -> None:
        self._keys.add(dedup_key(vector))

    def __contains__(self, vector: object) -> bool:
        if not isinstance(vector, InputVector):
            return False
        return dedup_key(vector) in self._keys

    contains = __contains__

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[CanonicalKey]:
        return iter(self._keys)
