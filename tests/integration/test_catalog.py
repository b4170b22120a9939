"""Integration tests for catalog_service: pricing plans, gallery, achievements."""

import pytest
from services.catalog_service.models import PricingPlan
from sqlalchemy import select
from tests.factories import GalleryItemFactory, PricingPlanFactory


# ---------------------------------------------------------------------------
# Pricing plans
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_plan_accepts_newline_features(catalog_client):
    response = await catalog_client.post(
        "/admin/pricing",
        json={
            "name": "Personal Training",
            "price": 6000,
            "duration_days": 30,
            "features": "Coached sessions\n\nNutrition plan\n  Progress tracking  ",
            "most_popular": True,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["features"] == ["Coached sessions", "Nutrition plan", "Progress tracking"]
    assert data["most_popular"] is True


@pytest.mark.asyncio
@pytest.mark.integration
async def test_duplicate_plan_name_conflicts(catalog_client, db_session):
    db_session.add(PricingPlanFactory.create(name="Online Coaching"))
    await db_session.commit()

    response = await catalog_client.post(
        "/admin/pricing",
        json={"name": "Online Coaching", "price": 4000, "duration_days": 30},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
@pytest.mark.integration
async def test_public_pricing_is_ordered_by_duration(catalog_client, db_session):
    db_session.add_all(
        [
            PricingPlanFactory.create(name="Quarterly", duration_days=90, price=15000),
            PricingPlanFactory.create(name="Monthly", duration_days=30, price=6000),
        ]
    )
    await db_session.commit()

    response = await catalog_client.get("/pricing")
    assert response.status_code == 200
    assert [plan["name"] for plan in response.json()] == ["Monthly", "Quarterly"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_and_delete_plan(catalog_client, db_session):
    plan = PricingPlanFactory.create(price=5000)
    db_session.add(plan)
    await db_session.commit()
    plan_id = plan.id

    response = await catalog_client.patch(
        f"/admin/pricing/{plan_id}", json={"price": 5500}
    )
    assert response.status_code == 200, response.text
    assert response.json()["price"] == 5500

    response = await catalog_client.delete(f"/admin/pricing/{plan_id}")
    assert response.status_code == 200
    assert response.json() == {"deleted": True}

    result = await db_session.execute(select(PricingPlan))
    assert result.scalars().all() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_missing_plan_returns_404(catalog_client):
    response = await catalog_client.patch(
        "/admin/pricing/00000000-0000-0000-0000-000000000000", json={"price": 1}
    )
    assert response.status_code == 404


# ---------------------------------------------------------------------------
# Gallery & achievements
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_new_gallery_items_go_to_the_end(catalog_client, db_session):
    db_session.add(GalleryItemFactory.create(position=0))
    await db_session.commit()

    response = await catalog_client.post(
        "/admin/gallery",
        json={"image_url": "https://images.example.com/new.jpg", "caption": "New gym"},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["position"] == 1
    assert data["visible"] is True


@pytest.mark.asyncio
@pytest.mark.integration
async def test_public_gallery_hides_invisible_items(catalog_client, db_session):
    db_session.add_all(
        [
            GalleryItemFactory.create(caption="Shown", position=0),
            GalleryItemFactory.create(caption="Hidden", position=1, visible=False),
        ]
    )
    await db_session.commit()

    public = await catalog_client.get("/gallery")
    admin = await catalog_client.get("/admin/gallery")

    assert [item["caption"] for item in public.json()] == ["Shown"]
    assert len(admin.json()) == 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_achievement_lifecycle(catalog_client):
    response = await catalog_client.post(
        "/admin/achievements",
        json={
            "image_url": "https://images.example.com/before-after.jpg",
            "caption": "Lost 12kg",
            "transformation_period": 4,
        },
    )
    assert response.status_code == 201, response.text
    achievement_id = response.json()["id"]

    response = await catalog_client.patch(
        f"/admin/achievements/{achievement_id}", json={"visible": False}
    )
    assert response.status_code == 200
    assert (await catalog_client.get("/achievements")).json() == []

    response = await catalog_client.delete(f"/admin/achievements/{achievement_id}")
    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.integration
async def test_gallery_caption_too_short_is_rejected(catalog_client):
    response = await catalog_client.post(
        "/admin/gallery",
        json={"image_url": "https://images.example.com/x.jpg", "caption": "x"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_null_plan_fields_are_rejected(catalog_client, db_session):
    plan = PricingPlanFactory.create(name="Online Coaching", price=4000)
    db_session.add(plan)
    await db_session.commit()
    plan_id = plan.id

    for body in ({"name": None}, {"price": None}, {"features": None}):
        response = await catalog_client.patch(f"/admin/pricing/{plan_id}", json=body)
        assert response.status_code == 422, body

    response = await catalog_client.get("/pricing")
    assert response.json()[0]["name"] == "Online Coaching"
    assert response.json()[0]["price"] == 4000


@pytest.mark.asyncio
@pytest.mark.integration
async def test_null_gallery_fields_are_rejected(catalog_client, db_session):
    item = GalleryItemFactory.create(caption="Morning session")
    db_session.add(item)
    await db_session.commit()
    item_id = item.id

    response = await catalog_client.patch(
        f"/admin/gallery/{item_id}", json={"caption": None, "visible": None}
    )
    assert response.status_code == 422

    response = await catalog_client.patch(
        f"/admin/gallery/{item_id}", json={"caption": "Evening session"}
    )
    assert response.status_code == 200
    assert response.json()["caption"] == "Evening session"
    assert response.json()["visible"] is True


@pytest.mark.asyncio
@pytest.mark.integration
async def test_achievement_period_can_be_cleared(catalog_client):
    response = await catalog_client.post(
        "/admin/achievements",
        json={
            "image_url": "https://images.example.com/after.jpg",
            "caption": "Lost 8kg",
            "transformation_period": 3,
        },
    )
    achievement_id = response.json()["id"]

    response = await catalog_client.patch(
        f"/admin/achievements/{achievement_id}", json={"transformation_period": None}
    )
    assert response.status_code == 200, response.text
    assert response.json()["transformation_period"] is None
