"""Integration tests for orders_service: promo codes, intake and approval."""

import uuid

import pytest
from services.clients_service.models import Client, ClientStatus
from services.finance_service.models import Transaction
from services.orders_service.models import Order, PromoCode, PromoCodeStatus
from sqlalchemy import select
from tests.factories import OrderFactory, PricingPlanFactory, PromoCodeFactory


def _order_payload(**overrides) -> dict:
    payload = {
        "full_name": "Yacine Benali",
        "email": "yacine@example.com",
        "phone_number": "0550123456",
        "age": 29,
        "height": 180,
        "weight": 85,
        "experience_level": "beginner",
        "primary_goal": "fat_loss",
        "preferred_plan": "Personal Training",
        "subscription_duration": 3,
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Promo code validation (public)
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_validate_active_code(orders_client, db_session):
    db_session.add(PromoCodeFactory.create(code="AKRAM20", discount_percentage=20))
    await db_session.commit()

    response = await orders_client.post("/promo-codes/validate", json={"code": "akram20"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Applied 20% discount."
    assert data["promo_code"]["code"] == "AKRAM20"


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "code,message",
    [
        ("", "Promo code cannot be empty."),
        ("MISSING1", "This promo code does not exist."),
        ("SPENT10", "This promo code has already been used."),
    ],
)
async def test_validate_failures_are_reported_in_body(
    orders_client, db_session, code, message
):
    db_session.add(PromoCodeFactory.create(code="SPENT10", status=PromoCodeStatus.USED))
    await db_session.commit()

    response = await orders_client.post("/promo-codes/validate", json={"code": code})
    assert response.status_code == 200
    assert response.json() == {"success": False, "promo_code": None, "message": message}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_validate_does_not_consume_code(orders_client, db_session):
    db_session.add(PromoCodeFactory.create(code="KEEPME"))
    await db_session.commit()

    for _ in range(2):
        response = await orders_client.post("/promo-codes/validate", json={"code": "KEEPME"})
        assert response.json()["success"] is True


# ---------------------------------------------------------------------------
# Promo code admin
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_create_and_list_codes(orders_client):
    response = await orders_client.post(
        "/admin/promo-codes", json={"code": "summer15", "discount_percentage": 15}
    )
    assert response.status_code == 201, response.text
    assert response.json()["code"] == "SUMMER15"

    response = await orders_client.post(
        "/admin/promo-codes", json={"code": "SUMMER15", "discount_percentage": 30}
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "This code already exists."

    response = await orders_client.get("/admin/promo-codes")
    assert [code["code"] for code in response.json()] == ["SUMMER15"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_admin_discount_out_of_range(orders_client):
    response = await orders_client.post(
        "/admin/promo-codes", json={"discount_percentage": 0}
    )
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# Order intake (public)
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submit_order_stores_computed_price(orders_client, db_session):
    db_session.add(PricingPlanFactory.create(name="Personal Training", price=6000))
    await db_session.commit()

    # A tampered client-side price is ignored
    response = await orders_client.post(
        "/orders", json=_order_payload(final_price=100)
    )
    assert response.status_code == 200, response.text
    data = response.json()
    assert data["success"] is True
    assert data["final_price"] == 15300

    order = (await db_session.execute(select(Order))).scalar_one()
    assert order.final_price == 15300
    assert order.status.value == "pending"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submit_order_with_promo_keeps_code_active(orders_client, db_session):
    db_session.add(PricingPlanFactory.create(name="Personal Training", price=6000))
    db_session.add(PromoCodeFactory.create(code="TEN10", discount_percentage=10))
    await db_session.commit()

    response = await orders_client.post(
        "/orders", json=_order_payload(promo_code="ten10")
    )
    assert response.json()["final_price"] == 13770

    order = (await db_session.execute(select(Order))).scalar_one()
    assert order.promo_code == "TEN10"
    promo = (await db_session.execute(select(PromoCode))).scalar_one()
    assert promo.status == PromoCodeStatus.ACTIVE


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submit_order_with_used_promo_fails(orders_client, db_session):
    db_session.add(PricingPlanFactory.create(name="Personal Training"))
    db_session.add(PromoCodeFactory.create(code="GONE50", status=PromoCodeStatus.USED))
    await db_session.commit()

    response = await orders_client.post(
        "/orders", json=_order_payload(promo_code="GONE50")
    )
    assert response.json() == {
        "success": False,
        "message": "This promo code has already been used.",
        "order_id": None,
        "final_price": None,
    }
    assert (await db_session.execute(select(Order))).scalars().all() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submit_order_unknown_plan_or_duration(orders_client, db_session):
    db_session.add(PricingPlanFactory.create(name="Personal Training"))
    await db_session.commit()

    response = await orders_client.post(
        "/orders", json=_order_payload(preferred_plan="Gold")
    )
    assert response.json()["success"] is False
    assert response.json()["message"] == "Selected plan is not available."

    response = await orders_client.post(
        "/orders", json=_order_payload(subscription_duration=2)
    )
    assert response.json()["success"] is False


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submit_order_requires_other_goal(orders_client):
    response = await orders_client.post(
        "/orders", json=_order_payload(primary_goal="other")
    )
    assert response.status_code == 422
    assert "Please specify your goal." in response.text


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submit_order_validates_profile(orders_client):
    response = await orders_client.post("/orders", json=_order_payload(age=12))
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# Approval & rejection (admin)
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_order_creates_client_and_income(orders_client, db_session):
    order = OrderFactory.create(
        full_name="Amine Coach",
        subscription_duration=12,
        final_price=15000,
    )
    db_session.add(order)
    await db_session.commit()
    order_id = order.id

    response = await orders_client.post(
        f"/admin/orders/{order_id}/approve", json={"start_date": "2026-01-31"}
    )
    assert response.status_code == 200, response.text
    data = response.json()
    assert data["start_date"] == "2026-01-31"
    assert data["end_date"] == "2027-01-31"
    assert data["status"] == "active"
    assert data["membership_code"] == data["id"][:8].upper()

    client = (await db_session.execute(select(Client))).scalar_one()
    assert client.status == ClientStatus.ACTIVE

    transaction = (await db_session.execute(select(Transaction))).scalar_one()
    assert transaction.amount == 15000
    assert transaction.description == "Subscription: Amine Coach"
    assert transaction.client_id == client.id

    assert await db_session.get(Order, order_id) is None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_clamps_end_date_to_month_end(orders_client, db_session):
    order = OrderFactory.create(subscription_duration=1)
    db_session.add(order)
    await db_session.commit()

    response = await orders_client.post(
        f"/admin/orders/{order.id}/approve", json={"start_date": "2026-01-31"}
    )
    assert response.json()["end_date"] == "2026-02-28"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_free_order_records_no_income(orders_client, db_session):
    order = OrderFactory.create(final_price=0)
    db_session.add(order)
    await db_session.commit()

    response = await orders_client.post(f"/admin/orders/{order.id}/approve")
    assert response.status_code == 200, response.text
    assert (await db_session.execute(select(Transaction))).scalars().all() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_consumes_promo_code(orders_client, db_session):
    db_session.add(PromoCodeFactory.create(code="HALF50", discount_percentage=50))
    order = OrderFactory.create(promo_code="HALF50", final_price=3000)
    db_session.add(order)
    await db_session.commit()
    order_id = order.id

    response = await orders_client.post(f"/admin/orders/{order_id}/approve")
    assert response.status_code == 200, response.text

    promo = (await db_session.execute(select(PromoCode))).scalar_one()
    assert promo.status == PromoCodeStatus.USED
    assert promo.used_by_order_id == order_id
    assert promo.used_at is not None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_second_order_with_same_promo_is_aborted(orders_client, db_session):
    """Two pending orders share a code; only the first approval may redeem it."""
    db_session.add(PromoCodeFactory.create(code="ONLY1"))
    first = OrderFactory.create(promo_code="ONLY1", full_name="First Client")
    second = OrderFactory.create(promo_code="ONLY1", full_name="Second Client")
    db_session.add_all([first, second])
    await db_session.commit()
    first_id, second_id = first.id, second.id

    response = await orders_client.post(f"/admin/orders/{first_id}/approve")
    assert response.status_code == 200, response.text

    response = await orders_client.post(f"/admin/orders/{second_id}/approve")
    assert response.status_code == 409
    assert response.json()["detail"] == "Promo code has already been used"

    clients = (await db_session.execute(select(Client))).scalars().all()
    assert [c.full_name for c in clients] == ["First Client"]
    transactions = (await db_session.execute(select(Transaction))).scalars().all()
    assert len(transactions) == 1
    assert await db_session.get(Order, second_id) is not None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_with_deleted_promo_is_aborted(orders_client, db_session):
    order = OrderFactory.create(promo_code="VANISHED")
    db_session.add(order)
    await db_session.commit()
    order_id = order.id

    response = await orders_client.post(f"/admin/orders/{order_id}/approve")
    assert response.status_code == 404

    assert (await db_session.execute(select(Client))).scalars().all() == []
    assert await db_session.get(Order, order_id) is not None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_approve_unknown_order_returns_404(orders_client):
    response = await orders_client.post(f"/admin/orders/{uuid.uuid4()}/approve")
    assert response.status_code == 404
    assert response.json()["detail"] == "Order not found"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_reject_order_leaves_promo_active(orders_client, db_session):
    db_session.add(PromoCodeFactory.create(code="STAYS1"))
    order = OrderFactory.create(promo_code="STAYS1")
    db_session.add(order)
    await db_session.commit()
    order_id = order.id

    response = await orders_client.delete(f"/admin/orders/{order_id}")
    assert response.status_code == 200
    assert response.json() == {"deleted": True}

    assert await db_session.get(Order, order_id) is None
    promo = (await db_session.execute(select(PromoCode))).scalar_one()
    assert promo.status == PromoCodeStatus.ACTIVE


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_pending_orders(orders_client, db_session):
    db_session.add(OrderFactory.create(subscription_duration=6))
    await db_session.commit()

    response = await orders_client.get("/admin/orders")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["duration_label"] == "6 Months"
