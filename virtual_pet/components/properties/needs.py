from dataclasses import dataclass


@dataclass(frozen=True)
class Needs:
    """Bounded well-being attributes, each kept within ``[0, 100]``.

    Attributes:
        energy: Stamina; low energy forces sleep.
        hunger: Higher is hungrier.
        happiness: Mood; high happiness (with low hunger and high energy) makes the pet happy.
    """

    energy: int
    hunger: int
    happiness: int
