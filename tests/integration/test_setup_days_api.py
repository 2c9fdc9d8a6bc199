"""
HTTP behaviour of the setup day endpoints.
"""

from datetime import date

import pytest

from growguide.modules.cultivation.infrastructure.database.models import (
    PlantDayEntryModel,
    PlantModel,
    SetupDayEntryModel,
)
from tests.conftest import OTHER_USER_ID

pytestmark = pytest.mark.integration

DAY_PAYLOAD = {
    "date": "2024-01-10",
    "watered": True,
    "phValue": 6.2,
    "wateringAmount": 300,
    "fertilizers": [{"name": "GrowA", "amount": "10ml"}],
}


def days_url(setup_id) -> str:
    return f"/api/v1/setups/{setup_id}/days"


class TestCreateDay:

    async def test_created_with_camel_case_body(self, client, greenhouse):
        setup_id, (p1, p2) = greenhouse

        response = await client.post(days_url(setup_id), json=DAY_PAYLOAD)

        assert response.status_code == 201
        body = response.json()
        assert body["affectedPlants"] == 2
        assert body["createdPlantDays"] == 2
        assert body["skippedPlantIds"] == []
        assert body["distributionMismatch"] is None
        assert body["dayEntry"]["setupId"] == setup_id
        assert body["dayEntry"]["date"] == "2024-01-10"
        assert body["dayEntry"]["phValue"] == 6.2
        assert body["dayEntry"]["wateringAmount"] == 300
        assert [f["name"] for f in body["fertilizers"]] == ["GrowA"]
        assert body["fertilizers"][0]["amount"] == "10ml"

    async def test_snake_case_body_is_accepted(self, client, greenhouse, fetch_all):
        setup_id, (p1, p2) = greenhouse

        response = await client.post(
            days_url(setup_id),
            json={
                "date": "2024-01-10",
                "watering_amount": 300,
                "custom_distribution": [
                    {"plant_id": p1, "amount": 100},
                    {"plant_id": p2, "amount": 200},
                ],
            },
        )

        assert response.status_code == 201
        assert response.json()["distributionMismatch"] == 0
        plant_days = await fetch_all(PlantDayEntryModel, order_by=PlantDayEntryModel.plant_id)
        assert [d.watering_amount for d in plant_days] == [100, 200]

    async def test_duplicate_date_returns_existing_entry(self, client, greenhouse, count_rows):
        setup_id, _ = greenhouse
        first = await client.post(days_url(setup_id), json=DAY_PAYLOAD)

        response = await client.post(days_url(setup_id), json={**DAY_PAYLOAD, "wateringAmount": 50})

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "CONFLICT_ERROR"
        assert error["details"]["existing_day_entry"]["id"] == first.json()["dayEntry"]["id"]
        assert error["details"]["existing_day_entry"]["watering_amount"] == 300
        assert await count_rows(SetupDayEntryModel) == 1

    async def test_missing_date(self, client, greenhouse, count_rows):
        setup_id, _ = greenhouse
        payload = {key: value for key, value in DAY_PAYLOAD.items() if key != "date"}

        response = await client.post(days_url(setup_id), json=payload)

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["field"] == "date"
        assert await count_rows(SetupDayEntryModel) == 0

    async def test_malformed_body(self, client, greenhouse):
        setup_id, _ = greenhouse

        response = await client.post(days_url(setup_id), json={**DAY_PAYLOAD, "phValue": 20})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(e["field"] == "phValue" for e in error["details"]["errors"])

    async def test_setup_of_another_user(self, client, seeder):
        setup_id, _ = await seeder.setup_with_plants([("Theirs", None)], user_id=OTHER_USER_ID)

        response = await client.post(days_url(setup_id), json=DAY_PAYLOAD)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_missing_identity_header(self, client, greenhouse):
        setup_id, _ = greenhouse

        response = await client.post(days_url(setup_id), json=DAY_PAYLOAD, headers={"X-User-Id": ""})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_request_id_is_echoed(self, client, greenhouse):
        setup_id, _ = greenhouse

        response = await client.post(
            days_url(setup_id), json=DAY_PAYLOAD, headers={"X-Request-ID": "req-123"}
        )

        assert response.headers["X-Request-ID"] == "req-123"


class TestListAndDelete:

    async def test_list_newest_first(self, client, greenhouse):
        setup_id, _ = greenhouse
        await client.post(days_url(setup_id), json=DAY_PAYLOAD)
        await client.post(days_url(setup_id), json={**DAY_PAYLOAD, "date": "2024-01-11"})

        response = await client.get(days_url(setup_id))

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [d["date"] for d in body["dayEntries"]] == ["2024-01-11", "2024-01-10"]
        assert body["dayEntries"][0]["fertilizers"][0]["name"] == "GrowA"

    async def test_delete_cascades(self, client, greenhouse, count_rows):
        setup_id, _ = greenhouse
        created = await client.post(days_url(setup_id), json=DAY_PAYLOAD)
        day_id = created.json()["dayEntry"]["id"]

        response = await client.delete(f"{days_url(setup_id)}/{day_id}")

        assert response.status_code == 200
        assert response.json() == {
            "dayEntryId": day_id,
            "deletedPlantDays": 2,
            "deletedFertilizers": 3,
        }
        assert await count_rows(PlantDayEntryModel) == 0

    async def test_delete_unknown_day(self, client, greenhouse):
        setup_id, _ = greenhouse

        response = await client.delete(f"{days_url(setup_id)}/424242")

        assert response.status_code == 404


class TestWaterDistribution:

    async def test_equal_split_with_override(self, client, greenhouse):
        setup_id, (p1, p2) = greenhouse

        response = await client.post(
            f"/api/v1/setups/{setup_id}/water-distribution",
            json={"total": 300, "override": {"plantId": p1, "amount": 100}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["shares"] == [
            {"plantId": p1, "amount": 100},
            {"plantId": p2, "amount": 200},
        ]
        assert body["mismatch"] == 0
        assert body["warning"] is None
        assert body["waterLimit"] == 1000
        assert body["exceedsWaterLimit"] is False

    async def test_total_above_water_limit_is_flagged(self, client, greenhouse):
        setup_id, (p1, p2) = greenhouse

        response = await client.post(
            f"/api/v1/setups/{setup_id}/water-distribution",
            json={
                "total": 1500,
                "shares": [{"plantId": p1, "amount": 1}, {"plantId": p2, "amount": 1}],
                "override": {"plantId": p1, "amount": 1499.0},
            },
        )

        body = response.json()
        assert body["shares"][1]["amount"] == 1
        assert body["mismatch"] == 0
        assert body["exceedsWaterLimit"] is True

    async def test_fractional_override_rejected(self, client, greenhouse):
        setup_id, (p1, _) = greenhouse

        response = await client.post(
            f"/api/v1/setups/{setup_id}/water-distribution",
            json={"total": 300, "override": {"plantId": p1, "amount": 150.9}},
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(e["field"].endswith("amount") for e in error["details"]["errors"])

    async def test_override_above_total(self, client, greenhouse):
        setup_id, (p1, _) = greenhouse

        response = await client.post(
            f"/api/v1/setups/{setup_id}/water-distribution",
            json={"total": 100, "override": {"plantId": p1, "amount": 101}},
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestStartFlowering:

    async def test_sets_flowering_date_once(self, client, greenhouse, seeder, fetch_all):
        setup_id, (p1, p2) = greenhouse
        await seeder.set_flowering(p2, date(2024, 1, 3))

        response = await client.post(
            f"/api/v1/setups/{setup_id}/start-flowering", json={"date": "2024-02-01"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "setupId": setup_id,
            "floweringDate": "2024-02-01",
            "updatedPlants": 1,
        }
        plants = await fetch_all(PlantModel)
        assert {p.id: p.flowering_start_date for p in plants} == {
            p1: date(2024, 2, 1),
            p2: date(2024, 1, 3),
        }

    async def test_empty_setup(self, client, seeder):
        setup_id, _ = await seeder.setup_with_plants([])

        response = await client.post(f"/api/v1/setups/{setup_id}/start-flowering")

        assert response.status_code == 404


async def test_health(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["checks"]["database"]["status"] == "healthy"
