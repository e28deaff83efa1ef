"""차량 API 및 서비스 테스트.

Fleet tests: registration, status transitions, capacity count and the
pricing quote endpoint.
"""

import uuid
from decimal import Decimal

from httpx import AsyncClient

from carrental.domain.enums import CarCategory, CarStatus
from carrental.repositories.car_repository import car_repository
from carrental.services.car_service import CAR_TRANSITIONS, can_transition
from tests.conftest import make_car

CARS_URL = "/api/v1/cars"


def car_body(plate: str = "B-CR-7001", category: str = "compact") -> dict:
    return {"manufacturer": "Kia", "model": "Ceed", "license_plate": plate, "category": category}


class TestCarTransitions:
    """차량 상태 전이표."""

    def test_retired_is_final(self):
        assert CAR_TRANSITIONS[CarStatus.RETIRED] == frozenset()

    def test_rented_car_only_returns(self):
        assert can_transition(CarStatus.RENTED, CarStatus.AVAILABLE)
        assert not can_transition(CarStatus.RENTED, CarStatus.MAINTENANCE)
        assert not can_transition(CarStatus.RENTED, CarStatus.RETIRED)


class TestCapacityCount:
    """등급별 용량 집계."""

    async def test_counts_available_and_rented(self, db):
        await make_car(db, "B-EC-0001", CarCategory.ECONOMY, CarStatus.AVAILABLE)
        await make_car(db, "B-EC-0002", CarCategory.ECONOMY, CarStatus.RENTED)
        await make_car(db, "B-EC-0003", CarCategory.ECONOMY, CarStatus.MAINTENANCE)
        await make_car(db, "B-EC-0004", CarCategory.ECONOMY, CarStatus.RETIRED)
        await make_car(db, "B-SV-0001", CarCategory.SUV, CarStatus.AVAILABLE)

        assert await car_repository.count_in_category(db, CarCategory.ECONOMY) == 2
        assert await car_repository.count_in_category(db, CarCategory.SUV) == 1
        assert await car_repository.count_in_category(db, CarCategory.MIDSIZE) == 0


class TestCarAPI:
    """차량 API."""

    async def test_create_car(self, client: AsyncClient):
        res = await client.post(CARS_URL, json=car_body())
        assert res.status_code == 201
        data = res.json()
        assert data["status"] == "available"
        assert data["category"] == "compact"
        assert data["retired_at"] is None

    async def test_plate_is_trimmed(self, client: AsyncClient):
        res = await client.post(CARS_URL, json=car_body(plate="  B-CR-7002 "))
        assert res.status_code == 201
        assert res.json()["license_plate"] == "B-CR-7002"

    async def test_invalid_plate(self, client: AsyncClient):
        """소문자나 공백이 있는 번호판은 400."""
        res = await client.post(CARS_URL, json=car_body(plate="b cr 1"))
        assert res.status_code == 400
        assert res.json()["detail"]["code"] == "car.invalid_license_plate"

    async def test_missing_manufacturer(self, client: AsyncClient):
        body = car_body()
        body["manufacturer"] = "   "
        res = await client.post(CARS_URL, json=body)
        assert res.status_code == 400
        assert res.json()["detail"]["code"] == "car.required_field"

    async def test_unknown_category(self, client: AsyncClient):
        res = await client.post(CARS_URL, json=car_body(category="limousine"))
        assert res.status_code == 422

    async def test_duplicate_plate(self, client: AsyncClient):
        await client.post(CARS_URL, json=car_body(plate="B-CR-7003"))
        res = await client.post(CARS_URL, json=car_body(plate="B-CR-7003"))
        assert res.status_code == 409
        assert res.json()["detail"]["code"] == "car.license_plate_exists"

    async def test_maintenance_round_trip(self, client: AsyncClient):
        car = (await client.post(CARS_URL, json=car_body(plate="B-CR-7004"))).json()

        res = await client.post(f"{CARS_URL}/{car['id']}/maintenance")
        assert res.status_code == 200
        assert res.json()["status"] == "maintenance"

        res = await client.post(f"{CARS_URL}/{car['id']}/maintenance")
        assert res.status_code == 400

        res = await client.post(f"{CARS_URL}/{car['id']}/maintenance/return")
        assert res.status_code == 200
        assert res.json()["status"] == "available"

    async def test_retire(self, client: AsyncClient):
        car = (await client.post(CARS_URL, json=car_body(plate="B-CR-7005"))).json()

        res = await client.post(f"{CARS_URL}/{car['id']}/retire")
        assert res.status_code == 200
        assert res.json()["status"] == "retired"
        assert res.json()["retired_at"] is not None

        res = await client.post(f"{CARS_URL}/{car['id']}/retire")
        assert res.status_code == 400
        assert res.json()["detail"]["code"] == "car.invalid_status_transition"

        res = await client.post(f"{CARS_URL}/{car['id']}/maintenance")
        assert res.status_code == 400

    async def test_rented_car_cannot_retire(self, client: AsyncClient, db):
        car = await make_car(db, "B-RN-0001", CarCategory.ECONOMY, CarStatus.RENTED)
        res = await client.post(f"{CARS_URL}/{car.id}/retire")
        assert res.status_code == 400

    async def test_get_missing(self, client: AsyncClient):
        res = await client.get(f"{CARS_URL}/{uuid.uuid4()}")
        assert res.status_code == 404
        assert res.json()["detail"]["code"] == "car.not_found"

    async def test_list_filters(self, client: AsyncClient):
        await client.post(CARS_URL, json=car_body(plate="B-CR-7101", category="compact"))
        await client.post(CARS_URL, json=car_body(plate="B-CR-7102", category="suv"))
        suv = (await client.post(CARS_URL, json=car_body(plate="B-CR-7103", category="suv"))).json()
        await client.post(f"{CARS_URL}/{suv['id']}/maintenance")

        res = await client.get(CARS_URL)
        assert res.json()["total"] == 3

        res = await client.get(CARS_URL, params={"category": "suv"})
        assert res.json()["total"] == 2

        res = await client.get(CARS_URL, params={"category": "suv", "status": "available"})
        assert [c["license_plate"] for c in res.json()["items"]] == ["B-CR-7102"]

    async def test_list_pagination_bounds(self, client: AsyncClient):
        res = await client.get(CARS_URL, params={"page": 0})
        assert res.status_code == 422


class TestPricingQuoteAPI:
    """가격 견적 API."""

    async def test_quote(self, client: AsyncClient):
        res = await client.get(f"{CARS_URL}/pricing-quote", params={
            "category": "compact",
            "start": "2030-01-01T10:00:00+00:00",
            "end": "2030-01-04T10:00:00+00:00",
        })
        assert res.status_code == 200
        data = res.json()
        assert data["days"] == 3
        assert data["discount_percent"] == 5
        assert Decimal(str(data["total"])) == Decimal("139.65")

    async def test_quote_invalid_period(self, client: AsyncClient):
        res = await client.get(f"{CARS_URL}/pricing-quote", params={
            "category": "suv",
            "start": "2030-01-04T10:00:00+00:00",
            "end": "2030-01-01T10:00:00+00:00",
        })
        assert res.status_code == 400
        assert res.json()["detail"]["code"] == "reservation.invalid_period"
