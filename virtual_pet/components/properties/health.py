from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Tracks current and stored maximum hit points.

    Attributes:
        health:
            Current hit points. Systems clamp this to ``[0, effective max]``
            where the effective max folds equipped modifiers over ``max_health``.
        max_health:
            Stored upper bound fixed at creation. Modifiers never change it.
    """

    health: int
    max_health: int
