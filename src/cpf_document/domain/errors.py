class CPFError(Exception):
    """Base class for errors raised by the CPF value object."""


class DigitIndexError(CPFError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"digit index {index} out of range for CPF with {length} digits")
        self.index = index
        self.length = length


class CPFDecodeError(CPFError, ValueError):
    pass
