# 📄 File: growguide/modules/cultivation/domain/services/water_distribution.py
# 🧭 Purpose (Layman Explanation):
# Splits a setup's daily water among its plants, evenly by default, and rebalances the others
# when the grower drags one plant's slider
# 🧪 Purpose (Technical Summary):
# Pure integer allocator over WaterShare lists: equal split with remainder handout,
# single-plant override with proportional (or equal, when the others are all zero)
# redistribution of the rest, and mismatch reporting. Never touches storage.
# 🔗 Dependencies:
# math, WaterShare value object, shared exceptions
# 🔄 Connected Modules / Calls From:
# WaterDistributionPreviewQueryHandler, tests

import math
from typing import List, Sequence

from growguide.shared.core.exceptions import NotFoundError, ValidationError

from ..models.water_share import WaterShare


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def equal_split(total: int, plant_ids: Sequence[int]) -> List[WaterShare]:
    """
    Split ``total`` evenly over ``plant_ids``.

    The first ``total % n`` plants (in the given order) receive one extra
    unit, so the shares always add up to ``total`` exactly.
    """
    if total < 0:
        raise ValidationError(
            "Total water amount cannot be negative",
            field="total",
            value=total,
            constraint="total >= 0",
        )

    count = len(plant_ids)
    if count == 0:
        return []

    base, remainder = divmod(total, count)
    return [
        WaterShare(plant_id=plant_id, amount=base + 1 if index < remainder else base)
        for index, plant_id in enumerate(plant_ids)
    ]


def apply_override(
    shares: Sequence[WaterShare],
    plant_id: int,
    value: int,
    total: int,
) -> List[WaterShare]:
    """
    Pin one plant's share to ``value`` and redistribute the rest.

    The remaining ``total - value`` is spread over the other plants in
    proportion to their current shares, rounded half up per plant. That
    rounding can leave the sum off by a unit or two; use
    ``distribution_mismatch`` to detect it. When every other plant is at
    zero, the remainder is split equally instead and the result is exact.

    Raises:
        ValidationError: If ``value`` is outside ``[0, total]``
        NotFoundError: If ``plant_id`` is not among ``shares``
    """
    if value < 0 or value > total:
        raise ValidationError(
            f"Override must be between 0 and {total}",
            field="amount",
            value=value,
            constraint=f"0 <= amount <= {total}",
        )

    if not any(share.plant_id == plant_id for share in shares):
        raise NotFoundError(
            f"Plant {plant_id} is not part of this distribution",
            resource_type="plant",
            resource_id=plant_id,
        )

    others = [share for share in shares if share.plant_id != plant_id]
    remaining = total - value
    others_sum = sum(share.amount for share in others)

    if others_sum > 0:
        new_amounts = {
            share.plant_id: _round_half_up(remaining * share.amount / others_sum)
            for share in others
        }
    elif others:
        base, leftover = divmod(remaining, len(others))
        new_amounts = {
            share.plant_id: base + 1 if index < leftover else base
            for index, share in enumerate(others)
        }
    else:
        new_amounts = {}

    return [
        WaterShare(
            plant_id=share.plant_id,
            amount=value if share.plant_id == plant_id else new_amounts[share.plant_id],
        )
        for share in shares
    ]


def distribution_total(shares: Sequence[WaterShare]) -> float:
    return sum(share.amount for share in shares)


def distribution_mismatch(shares: Sequence[WaterShare], total: float) -> float:
    """Sum of ``shares`` minus ``total``; zero when the split is exact."""
    return distribution_total(shares) - total
