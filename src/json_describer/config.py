"""DescriberConfig, TallyOrder and MemberErrorPolicy.

DescriberConfig is a frozen (immutable) dataclass holding the options shared
by the describer, renderer, inventory and differ.  TallyOrder selects the
order in which member tallies are rendered; MemberErrorPolicy selects what
happens when a member of an already-validated container fails classification.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class TallyOrder(StrEnum):
    """Order of the per-kind phrases produced by ``friendly()``.

    - PRIORITY:     object, array, string, number, true, false, null.
    - ALPHABETICAL: by kind name.
    """

    PRIORITY = auto()
    ALPHABETICAL = auto()


class MemberErrorPolicy(StrEnum):
    """What to do when a container member fails classification.

    - RAISE: log at ERROR and raise.
    - SKIP:  log at WARNING and carry on without the member.
    """

    RAISE = auto()
    SKIP = auto()


@dataclass(frozen=True, slots=True)
class DescriberConfig:
    """Immutable options for describing, rendering and diffing.

    Attributes:
        tally_order:   Phrase order for container descriptions.
        member_errors: Policy for member classification failures.

    Plain strings (``"alphabetical"``, ``"skip"``) are accepted and coerced
    to the corresponding enum member.
    """

    tally_order: TallyOrder = TallyOrder.PRIORITY
    member_errors: MemberErrorPolicy = MemberErrorPolicy.RAISE

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "tally_order", TallyOrder(self.tally_order))
        except ValueError:
            msg = (
                f"tally_order must be one of {list(TallyOrder)}, "
                f"got {self.tally_order!r}"
            )
            raise ValueError(msg) from None
        try:
            object.__setattr__(
                self, "member_errors", MemberErrorPolicy(self.member_errors)
            )
        except ValueError:
            msg = (
                f"member_errors must be one of {list(MemberErrorPolicy)}, "
                f"got {self.member_errors!r}"
            )
            raise ValueError(msg) from None


DEFAULT_CONFIG = DescriberConfig()
