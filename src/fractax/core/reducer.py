from __future__ import annotations


def gcd(x: int, y: int) -> int:
    """
    Greatest common divisor of the absolute values of x and y (Euclidean algorithm).

    A zero argument yields the absolute value of the other one, so gcd(0, d) == |d|. gcd(0, 0) is undefined.
    """
    x, y = abs(x), abs(y)
    if x == 0 and y == 0:
        raise ZeroDivisionError("gcd(0, 0) is undefined")
    while y != 0:
        x, y = y, x % y
    return x


def reduce(
    num: int,
    denom: int,
) -> tuple[int, int]:
    """
    Puts a fraction in lowest terms by dividing numerator and denominator by their greatest common divisor.
    The sign is moved to the numerator, the returned denominator is always positive.

    Args:
        num (int): Numerator
        denom (int): Denominator, must not be zero

    Returns:
        tuple[int, int]: Reduced numerator and denominator
    """
    if denom == 0:
        raise ZeroDivisionError(f"Cannot reduce {num}/{denom}: denominator is zero")
    # zero numerator: the divisor would be |denom|, which leaves 0/1 (after sign normalization)
    if num == 0:
        return 0, 1

    divisor = gcd(num, denom)
    num, denom = num // divisor, denom // divisor
    if denom < 0:
        num, denom = -num, -denom
    return num, denom
