from __future__ import annotations

import logging
import math
import numbers
import random
import re
import unicodedata
import warnings
from collections.abc import Iterable, Iterator
from decimal import Decimal
from operator import index as as_index
from typing import Any, ClassVar, Protocol

from cpf_document.config import settings
from cpf_document.domain.errors import DigitIndexError
from cpf_document.domain.services.check_digit import check_digit
from cpf_document.domain.services.content_hash import content_hash
from cpf_document.domain.value_objects.validity_state import ValidityState

logger = logging.getLogger(__name__)

LENGTH = 11
_ASCII_DIGIT = re.compile(r"[0-9]")
_HASH_NAMESPACE = settings.hash_namespace


class DigitSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def to_digit(value: numbers.Real) -> int | None:
    """Unit digit of the integer part of ``value``; None when not finite."""
    if isinstance(value, numbers.Rational):
        return math.trunc(value) % 10
    if isinstance(value, Decimal):
        return math.trunc(value) % 10 if value.is_finite() else None
    if not math.isfinite(value):
        return None
    return math.trunc(value) % 10


def _normalize(values: Iterable[numbers.Real]) -> tuple[int, ...]:
    digits: list[int] = []
    for value in values:
        digit = to_digit(value)
        if digit is None:
            continue
        digits.append(digit)
        if len(digits) == LENGTH:
            break
    return tuple(digits)


class CPF:
    """Immutable CPF (Cadastro de Pessoas Físicas) document.

    Holds up to eleven decimal digits. Every value given to the constructor
    is reduced to the unit digit of its integer part (``trunc(x) % 10``);
    NaN and infinities are skipped and anything past the eleventh digit is
    ignored. A CPF without digits is always ``CPF.NIL``.

    >>> cpf = CPF([3, 1, 6, 7, 5, 7, 4, 5, 5, 0, 1])
    >>> cpf.format()
    '316.757.455-01'
    >>> cpf.check_validity()
    True
    """

    __slots__ = ("_digits", "_hash_code")

    NIL: ClassVar[CPF]

    get_check_digit = staticmethod(check_digit)

    def __new__(cls, digits: Iterable[numbers.Real] = ()) -> CPF:
        normalized = _normalize(digits)
        if not normalized:
            return CPF.NIL
        return cls._from_digits(normalized)

    @classmethod
    def _from_digits(cls, digits: tuple[int, ...]) -> CPF:
        self = object.__new__(cls)
        object.__setattr__(self, "_digits", digits)
        object.__setattr__(self, "_hash_code", None)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CPF):
            return NotImplemented
        return hash(self) == hash(other) and self._digits == other._digits

    def __hash__(self) -> int:
        # Racing first calls compute the same value, no lock needed.
        if self._hash_code is None:
            object.__setattr__(self, "_hash_code", content_hash(self._digits, _HASH_NAMESPACE))
        return self._hash_code

    def __repr__(self) -> str:
        return f"CPF({self.format()!r})"

    def __str__(self) -> str:
        return self.format()

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._digits)

    def __reduce__(self) -> tuple[type[CPF], tuple[tuple[int, ...]]]:
        return (CPF, (self._digits,))

    def __copy__(self) -> CPF:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> CPF:
        return self

    @property
    def length(self) -> int:
        """The number of digits in the CPF."""
        return len(self._digits)

    @property
    def size(self) -> int:
        """The number of digits in the CPF. Deprecated, use ``length``."""
        warnings.warn("CPF.size is deprecated, use CPF.length", DeprecationWarning, stacklevel=2)
        return len(self._digits)

    def to_json(self) -> str:
        """Serialized form: the digits with no separators."""
        return "".join(str(d) for d in self._digits)

    def to_list(self) -> list[int]:
        return list(self._digits)

    def at(self, index: int) -> int | None:
        """Digit at ``index``, counting from the end when negative.

        Returns None when the index falls outside the digits.
        """
        position = self._position(index)
        return None if position is None else self._digits[position]

    def with_digit(self, index: int, value: numbers.Real) -> CPF:
        """Copy of this CPF with the digit at ``index`` replaced by ``value``.

        ``value`` is normalized like the constructor does. When the digit is
        unchanged the same instance is returned.

        Raises:
            DigitIndexError: if ``index`` falls outside the digits.
        """
        position = self._position(index)
        if position is None:
            raise DigitIndexError(index, len(self._digits))
        digit = to_digit(value)
        if digit == self._digits[position]:
            return self
        head, tail = self._digits[:position], self._digits[position + 1 :]
        if digit is None:
            # same as constructing from the replaced sequence: the slot is skipped
            return CPF(head + tail)
        return self._from_digits(head + (digit,) + tail)

    def _position(self, index: int) -> int | None:
        index = as_index(index)
        position = index + len(self._digits) if index < 0 else index
        return position if 0 <= position < len(self._digits) else None

    def get_validity(self) -> ValidityState:
        """Validity state of the CPF.

        - ``value_missing``: true if the CPF has no digits;
        - ``too_short``: true if it has between one and ten digits;
        - ``type_mismatch``: true if it has eleven digits but they are all
          equal or the check digits do not match.
        """
        d = self._digits
        type_mismatch = len(d) == LENGTH and (
            len(set(d)) == 1
            or check_digit(d, 0, 9) != d[9]
            or check_digit(d, 0, 10) != d[10]
        )
        return ValidityState(
            value_missing=len(d) == 0,
            too_short=0 < len(d) < LENGTH,
            type_mismatch=type_mismatch,
        )

    def check_validity(self) -> bool:
        """True if the CPF has eleven digits and both check digits match.

        See https://pt.wikipedia.org/wiki/Cadastro_de_pessoas_f%C3%ADsicas#D%C3%ADgitos_verificadores
        """
        return self.get_validity().valid

    def format(self) -> str:
        """Formats the CPF as ``###.###.###-##``, stopping where digits run out."""
        text = "".join(str(d) for d in self._digits)
        output = text[0:3]
        if len(text) < 3:
            return output
        output += "." + text[3:6]
        if len(text) < 6:
            return output
        output += "." + text[6:9]
        if len(text) < 9:
            return output
        return output + "-" + text[9:11]

    @classmethod
    def from_string(cls, text: str) -> CPF:
        """Builds a CPF from the decimal digits found in ``text``.

        Formatted or not, any other character is ignored. Text with fewer
        than eleven digits gives an incomplete CPF, text with none gives
        ``CPF.NIL``.
        """
        found = _ASCII_DIGIT.findall(unicodedata.normalize("NFD", text))
        if len(found) > LENGTH:
            logger.debug("Ignoring %d digits past the first %d", len(found) - LENGTH, LENGTH)
        return cls(int(d) for d in found)

    @classmethod
    def create(cls, rng: DigitSource | None = None) -> CPF:
        """Random valid CPF: nine uniform digits plus both check digits.

        Eleven equal digits are not ruled out, callers needing that guarantee
        should check ``check_validity()``.
        """
        source: DigitSource = rng if rng is not None else random  # type: ignore[assignment]
        digits = [source.randint(0, 9) for _ in range(9)]
        digits.append(check_digit(digits))
        digits.append(check_digit(digits))
        return cls(digits)


CPF.NIL = CPF._from_digits(())
