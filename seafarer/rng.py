"""Random numbers drawn from the operating system's secure source."""

import secrets


def random_int(num: int) -> int:
    """Return an integer from 0 to ``num - 1``."""
    if num <= 0:
        raise ValueError(f"upper bound must be positive, got {num}")
    return secrets.randbelow(num)


def dice_roll(num: int) -> int:
    """Return an integer from 1 to ``num``, like a roll of an ``num``-sided die."""
    return random_int(num) + 1