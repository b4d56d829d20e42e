import logging
import re
from typing import Optional

from hedera_transfer_amount.shared.models import EditKind
from hedera_transfer_amount.shared.parameter_schemas import EditProposal

logger = logging.getLogger(__name__)

# Either "." or "," may act as the fractional separator, at most once.
SEPARATOR_CLASS = "[.,]"
AMOUNT_SHAPE = re.compile(rf"(?P<whole>\d*)(?:{SEPARATOR_CLASS}(?P<fraction>\d*))?", re.ASCII)


class AmountInputGuard:
    """Keystroke filter for the transfer amount field.

    Deletions are always allowed so the user can clear an over-precise or
    zero-padded value. Insertions are allowed only when the resulting text is a
    well-formed decimal quantity:
        - digits with at most one fractional separator ("." or ","),
        - no more fractional digits than the asset supports,
        - no duplicate leading zero ("00").
    """

    @staticmethod
    def rejection_reason(text: str, max_decimals: int) -> Optional[str]:
        """Return why ``text`` may not be entered, or None when it may."""
        match = AMOUNT_SHAPE.fullmatch(text)
        if match is None:
            return "shape"

        fraction = match.group("fraction")
        if fraction is not None and len(fraction) > max_decimals:
            return "precision"

        if text.startswith("00"):
            return "leading_zero"

        return None

    @staticmethod
    def decide(proposal: EditProposal, max_decimals: int) -> bool:
        if proposal.edit_kind == EditKind.DELETE:
            return True

        text = proposal.proposed()
        reason = AmountInputGuard.rejection_reason(text, max_decimals)
        if reason is not None:
            logger.debug(
                "Rejected amount edit %r (max_decimals=%d): %s",
                text,
                max_decimals,
                reason,
            )
            return False
        return True


def is_edit_allowed(
    current_text: str,
    inserted_fragment: Optional[str],
    edit_kind: EditKind,
    max_decimals: int,
    proposed_text: Optional[str] = None,
) -> bool:
    proposal = EditProposal(
        current_text=current_text,
        inserted_fragment=inserted_fragment,
        edit_kind=edit_kind,
        proposed_text=proposed_text,
    )
    return AmountInputGuard.decide(proposal, max_decimals)
