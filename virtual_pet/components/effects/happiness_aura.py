"""Happiness aura modifier ("Magic Amulet").

Adds happiness once per turn advance, after the wrapped pet has applied its
own turn effect (including any behavior transition).
"""

from dataclasses import dataclass

HAPPINESS_AURA_AMOUNT = 15


@dataclass(frozen=True)
class HappinessAura:
    """Per-turn happiness bonus.

    Attributes:
        amount: Happiness added after each turn advance (capped at 100).
    """

    amount: int = HAPPINESS_AURA_AMOUNT
