"""Digit-based checks and transformations on integers."""


def is_palindrome_number(x):
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    reversed_value = 0
    remaining = x
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x


def digit_square_sum(n):
    """Return the sum of the squares of the decimal digits of ``n``.

    Values below one yield zero.
    """
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n):
    """Return True if repeatedly summing squared digits of ``n`` reaches 1.

    Every unhappy number falls into the cycle through 4, which ends the search.
    """
    if n < 1:
        raise ValueError(f"happy numbers are defined for positive integers, got {n}")
    while True:
        if n == 1:
            return True
        if n == 4:
            return False
        n = digit_square_sum(n)


def _digit_sum(num):
    total = 0
    while num > 0:
        num, digit = divmod(num, 10)
        total += digit
    return total


def add_digits(num):
    """Repeatedly add the digits of ``num`` until a single digit remains.

    Negative input yields zero.
    """
    while not 0 <= num <= 9:
        num = _digit_sum(num)
    return num


def is_power_of_three(n):
    """Return True if ``n`` is a non-negative integer power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1