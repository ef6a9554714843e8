from __future__ import annotations

import hashlib
from collections.abc import Sequence

NIL_HASH = 0


def content_hash(digits: Sequence[int], namespace: str) -> int:
    """Stable hash of a digit sequence, independent of ``PYTHONHASHSEED``.

    BLAKE2b personalised with ``namespace`` keeps CPF hashes apart from other
    digit sequences hashed the same way. An empty sequence always hashes to
    ``NIL_HASH``.
    """
    if not digits:
        return NIL_HASH
    # blake2b caps the personalisation string at 16 bytes
    person = namespace.encode("utf-8")[: hashlib.blake2b.PERSON_SIZE]
    digest = hashlib.blake2b(bytes(digits), digest_size=8, person=person).digest()
    value = int.from_bytes(digest, "big", signed=True)
    # -1 is reserved by CPython as an error marker for __hash__
    return -2 if value == -1 else value
