from dataclasses import dataclass


@dataclass(frozen=True)
class ValidityState:
    """Why a CPF is (or is not) valid.

    - ``value_missing``: the CPF has no digits;
    - ``too_short``: it has between one and ten digits;
    - ``type_mismatch``: it has eleven digits but they are all the same or a
      check digit does not match.
    """

    value_missing: bool
    too_short: bool
    type_mismatch: bool

    @property
    def valid(self) -> bool:
        return not (self.value_missing or self.too_short or self.type_mismatch)
