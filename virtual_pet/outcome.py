"""Action outcomes.

Illegal actions never raise: the current behavior absorbs them and reports a
``REJECTED`` outcome carrying a human readable reason. Every reducer call
stores the outcome of the operation it performed on the returned ``State``.
"""

from dataclasses import dataclass
from typing import Optional

from virtual_pet.types import OutcomeKind


@dataclass(frozen=True)
class Outcome:
    """Result of a single action.

    Attributes:
        kind: ``APPLIED`` if the action took effect, ``REJECTED`` otherwise.
        reason: Why the action was rejected (``None`` when applied).
    """

    kind: OutcomeKind
    reason: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.kind == OutcomeKind.APPLIED


APPLIED = Outcome(kind=OutcomeKind.APPLIED)


def rejected(reason: str) -> Outcome:
    """Return a ``REJECTED`` outcome with ``reason``."""
    return Outcome(kind=OutcomeKind.REJECTED, reason=reason)
