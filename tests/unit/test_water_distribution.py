import pytest

from growguide.modules.cultivation.domain.models.water_share import WaterShare
from growguide.modules.cultivation.domain.services.water_distribution import (
    apply_override,
    distribution_mismatch,
    distribution_total,
    equal_split,
)
from growguide.shared.core.exceptions import NotFoundError, ValidationError


def amounts(shares):
    return [share.amount for share in shares]


class TestEqualSplit:

    def test_remainder_goes_to_first_members(self):
        shares = equal_split(10, [11, 12, 13])

        assert [s.plant_id for s in shares] == [11, 12, 13]
        assert amounts(shares) == [4, 3, 3]

    def test_exact_division(self):
        assert amounts(equal_split(300, [1, 2])) == [150, 150]

    @pytest.mark.parametrize("total", [0, 1, 7, 299, 1000, 1001])
    @pytest.mark.parametrize("count", [1, 2, 3, 7])
    def test_sum_always_equals_total(self, total, count):
        shares = equal_split(total, list(range(1, count + 1)))

        assert distribution_total(shares) == total
        assert max(amounts(shares)) - min(amounts(shares)) <= 1

    def test_no_members(self):
        assert equal_split(500, []) == []

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            equal_split(-1, [1, 2])


class TestApplyOverride:

    def test_rest_is_redistributed_proportionally(self):
        shares = [WaterShare(plant_id=1, amount=100), WaterShare(plant_id=2, amount=100),
                  WaterShare(plant_id=3, amount=200)]

        result = apply_override(shares, plant_id=1, value=200, total=400)

        assert amounts(result) == [200, 67, 133]
        assert distribution_mismatch(result, 400) == 0

    def test_rounding_can_miss_total_and_is_reported(self):
        shares = equal_split(300, [1, 2, 3])

        result = apply_override(shares, plant_id=1, value=101, total=300)

        # 199 over two equal shares is 99.5 each, rounded half up
        assert amounts(result) == [101, 100, 100]
        assert distribution_mismatch(result, 300) == 1

    def test_others_at_zero_get_equal_split_of_rest(self):
        shares = [WaterShare(plant_id=1, amount=300), WaterShare(plant_id=2, amount=0),
                  WaterShare(plant_id=3, amount=0)]

        result = apply_override(shares, plant_id=1, value=295, total=300)

        assert amounts(result) == [295, 3, 2]
        assert distribution_mismatch(result, 300) == 0

    def test_override_to_full_total_zeroes_others(self):
        result = apply_override(equal_split(300, [1, 2, 3]), plant_id=2, value=300, total=300)

        assert amounts(result) == [0, 300, 0]

    def test_single_member(self):
        result = apply_override([WaterShare(plant_id=5, amount=100)], plant_id=5, value=40, total=100)

        assert amounts(result) == [40]
        assert distribution_mismatch(result, 100) == -60

    def test_order_is_preserved(self):
        shares = equal_split(90, [30, 10, 20])

        result = apply_override(shares, plant_id=10, value=0, total=90)

        assert [s.plant_id for s in result] == [30, 10, 20]

    @pytest.mark.parametrize("value", [-1, 301])
    def test_value_outside_total_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            apply_override(equal_split(300, [1, 2]), plant_id=1, value=value, total=300)

        assert exc_info.value.details["field"] == "amount"

    def test_unknown_plant_rejected(self):
        with pytest.raises(NotFoundError):
            apply_override(equal_split(300, [1, 2]), plant_id=99, value=10, total=300)


def test_mismatch_is_zero_for_exact_custom_distribution():
    shares = [WaterShare(plant_id=1, amount=100), WaterShare(plant_id=2, amount=200)]

    assert distribution_mismatch(shares, 300) == 0
    assert distribution_mismatch(shares, 350) == -50
