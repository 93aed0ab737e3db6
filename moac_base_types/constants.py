"""
Common values used for MOAC amounts.
"""

MOAC_1 = 10**18
"""One MOAC expressed in wei."""


def moac1() -> int:
    """Return 1 MOAC expressed in wei (10^18)."""
    return MOAC_1
