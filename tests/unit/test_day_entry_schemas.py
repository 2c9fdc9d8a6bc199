from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from growguide.modules.cultivation.presentation.api.schemas.day_entry_schemas import (
    CreateSetupDayEntryRequest,
    DeleteSetupDayEntryResponse,
    StartFloweringRequest,
)


def test_camel_case_request_becomes_command():
    request = CreateSetupDayEntryRequest.model_validate(
        {
            "date": "2024-03-10",
            "watered": True,
            "wateringAmount": 300,
            "fertilizers": [{"name": "GrowA", "amount": "10ml"}],
            "customDistribution": [{"plantId": 1, "amount": 100}, {"plantId": 2, "amount": 200}],
        }
    )

    command = request.to_command(setup_id=7, user_id=3)

    assert command.setup_id == 7
    assert command.user_id == 3
    assert command.date == date(2024, 3, 10)
    assert command.fertilizers[0].name == "GrowA"
    assert command.watering_amounts([1, 2, 99]) == {1: 100, 2: 200, 99: 0}


def test_watering_amount_defaults_to_zero():
    command = CreateSetupDayEntryRequest(date=date(2024, 3, 10)).to_command(1, 1)

    assert command.watering_amount == 0
    assert command.watering_amounts([5]) == {5: 0}


def test_flat_watering_without_distribution():
    command = CreateSetupDayEntryRequest(date=date(2024, 3, 10), watering_amount=250).to_command(1, 1)

    assert command.distribution_map() is None
    assert command.watering_amounts([5, 6]) == {5: 250, 6: 250}


def test_date_may_be_omitted_at_parse_time():
    request = CreateSetupDayEntryRequest.model_validate({"watered": True})

    assert request.to_command(1, 1).date is None


def test_negative_share_rejected():
    with pytest.raises(PydanticValidationError):
        CreateSetupDayEntryRequest.model_validate(
            {"date": "2024-03-10", "customDistribution": [{"plantId": 1, "amount": -5}]}
        )


def test_response_serializes_camel_case():
    response = DeleteSetupDayEntryResponse(day_entry_id=1, deleted_plant_days=2, deleted_fertilizers=3)

    assert response.model_dump(by_alias=True) == {
        "dayEntryId": 1,
        "deletedPlantDays": 2,
        "deletedFertilizers": 3,
    }


def test_flowering_request_without_date():
    command = StartFloweringRequest().to_command(setup_id=4, user_id=1)

    assert command.flowering_date is None
