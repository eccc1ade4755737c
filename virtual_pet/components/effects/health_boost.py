"""Health boost modifier ("Golden Armor")."""

from dataclasses import dataclass

HEALTH_BOOST_AMOUNT = 30


@dataclass(frozen=True)
class HealthBoost:
    """Raises the *effective* max health; the stored value is untouched.

    Attributes:
        amount: Flat bonus added to max health while equipped.
    """

    amount: int = HEALTH_BOOST_AMOUNT
