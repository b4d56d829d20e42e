import pytest

from hedera_transfer_amount.shared.hedera_utils.amount_input_guard import (
    AmountInputGuard,
    is_edit_allowed,
)
from hedera_transfer_amount.shared.models import EditKind
from hedera_transfer_amount.shared.parameter_schemas import EditProposal


def insert(current_text: str, fragment: str) -> EditProposal:
    return EditProposal(
        current_text=current_text,
        inserted_fragment=fragment,
        edit_kind=EditKind.INSERT,
    )


class TestAmountInputGuard:
    """Unit tests for AmountInputGuard.decide."""

    def test_accepts_separator_after_digit(self):
        assert AmountInputGuard.decide(insert("1", "."), 2) is True

    def test_rejects_digit_beyond_precision(self):
        assert AmountInputGuard.decide(insert("1.23", "4"), 2) is False

    def test_rejects_duplicate_leading_zero(self):
        assert AmountInputGuard.decide(insert("0", "0"), 8) is False

    @pytest.mark.parametrize(
        "current_text, fragment",
        [
            ("", "1"),
            ("", "0"),
            ("0", "."),
            ("0.", "0"),
            ("12", ","),
            ("12,", "5"),
            ("", "."),
            ("", ","),
            ("10", "0"),
        ],
    )
    def test_accepts_well_formed_amounts(self, current_text, fragment):
        assert AmountInputGuard.decide(insert(current_text, fragment), 2) is True

    @pytest.mark.parametrize(
        "current_text, fragment",
        [
            ("1", "a"),
            ("1", "-"),
            ("1.5", "."),
            ("1.5", ","),
            ("1,5", "."),
            ("", " "),
            ("1", "e5"),
            ("1", "\n"),
            ("", "١"),
        ],
    )
    def test_rejects_malformed_amounts(self, current_text, fragment):
        assert AmountInputGuard.decide(insert(current_text, fragment), 2) is False

    def test_comma_precision_matches_dot_precision(self):
        assert AmountInputGuard.decide(insert("1,2", "3"), 2) is True
        assert AmountInputGuard.decide(insert("1,23", "4"), 2) is False

    def test_zero_decimals_allow_separator_but_no_fraction_digits(self):
        assert AmountInputGuard.decide(insert("5", "."), 0) is True
        assert AmountInputGuard.decide(insert("5.", "1"), 0) is False

    def test_empty_insert_is_accepted(self):
        proposal = EditProposal(current_text="", inserted_fragment=None)
        assert AmountInputGuard.decide(proposal, 2) is True

    def test_pasted_fragment_is_checked_as_a_whole(self):
        assert AmountInputGuard.decide(insert("", "123.45"), 2) is True
        assert AmountInputGuard.decide(insert("", "123.456"), 2) is False

    @pytest.mark.parametrize("proposed_text", ["00", "1.2345", "1.", "", "1,2.3"])
    def test_deletions_are_always_accepted(self, proposed_text):
        proposal = EditProposal(
            current_text="1.23456",
            edit_kind=EditKind.DELETE,
            proposed_text=proposed_text,
        )
        assert AmountInputGuard.decide(proposal, 2) is True

    def test_edit_kind_accepts_plain_strings(self):
        proposal = EditProposal.model_validate(
            {"current_text": "0", "inserted_fragment": "0", "edit_kind": "delete"}
        )
        assert proposal.edit_kind == EditKind.DELETE
        assert AmountInputGuard.decide(proposal, 2) is True


class TestRejectionReason:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", None),
            ("1.2", None),
            ("1.2.3", "shape"),
            ("1.234", "precision"),
            ("00", "leading_zero"),
            ("00.1", "leading_zero"),
        ],
    )
    def test_reports_reason(self, text, expected):
        assert AmountInputGuard.rejection_reason(text, 2) == expected


def test_is_edit_allowed_wraps_decide():
    assert is_edit_allowed("1", ".", EditKind.INSERT, 2) is True
    assert is_edit_allowed("1.23", "4", EditKind.INSERT, 2) is False
    assert is_edit_allowed("1.234", None, EditKind.DELETE, 2, proposed_text="1.23") is True
