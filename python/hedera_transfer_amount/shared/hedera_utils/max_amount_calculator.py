from hedera_transfer_amount.shared.hedera_utils.decimals_utils import to_display_string
from hedera_transfer_amount.shared.parameter_schemas import ComputeMaxParameters


class MaxAmountCalculator:
    """Derives the value written into the amount field by the "max" action.

    For the native gas asset a fixed reserve is withheld so the account keeps
    enough to pay fees. When the balance does not exceed the reserve the whole
    balance is offered instead; the result is never negative.
    """

    @staticmethod
    def usable_balance(
        raw_balance: int, is_native_reserved: bool, reserve: int
    ) -> int:
        if raw_balance < 0:
            raise ValueError(f"Invalid balance: {raw_balance}")
        if reserve < 0:
            raise ValueError(f"Invalid reserve: {reserve}")

        if is_native_reserved and raw_balance > reserve:
            return raw_balance - reserve
        return raw_balance

    @staticmethod
    def compute_max(
        raw_balance: int,
        decimals: int,
        is_native_reserved: bool,
        reserve: int,
    ) -> str:
        usable = MaxAmountCalculator.usable_balance(
            int(raw_balance), is_native_reserved, int(reserve)
        )
        return to_display_string(usable, decimals)

    @staticmethod
    def compute_max_from_params(params: ComputeMaxParameters) -> str:
        return MaxAmountCalculator.compute_max(
            params.raw_balance,
            params.decimals,
            params.is_native_reserved,
            params.reserve,
        )
