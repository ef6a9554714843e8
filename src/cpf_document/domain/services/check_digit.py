from collections.abc import Sequence


def check_digit(digits: Sequence[int], start: int = 0, end: int | None = None) -> int:
    """Weighted mod-11 check digit over ``digits[start:end]``.

    Each digit at position ``i`` is weighted by ``end + 1 - i``. A remainder
    below 2 maps to 0, anything else to ``11 - remainder``.

    Args:
        digits (Sequence[int]): Digits to weight.
        start (int, optional): First index included. Defaults to 0.
        end (int | None, optional): Index after the last one included.
            Defaults to ``len(digits)``.

    Returns:
        int: The check digit, in [0, 9].
    """
    if end is None:
        end = len(digits)
    acc = sum(digits[i] * (end + 1 - i) for i in range(start, end))
    rem = acc % 11
    return 0 if rem < 2 else 11 - rem
