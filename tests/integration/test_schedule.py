"""Integration tests for the weekly schedule grid."""

import uuid

import pytest
from tests.factories import ClientFactory


@pytest.mark.asyncio
@pytest.mark.integration
async def test_empty_schedule_has_every_day(clients_client):
    response = await clients_client.get("/admin/schedule")
    assert response.status_code == 200
    data = response.json()
    assert data["days"][0] == "Monday"
    assert data["days"][-1] == "Sunday"
    assert data["time_slots"][0] == "8:00"
    assert data["time_slots"][-1] == "20:00"
    assert len(data["time_slots"]) == 13
    assert all(slots == {} for slots in data["schedule"].values())


@pytest.mark.asyncio
@pytest.mark.integration
async def test_save_schedule_drops_empty_cells(clients_client, db_session):
    client = ClientFactory.create()
    db_session.add(client)
    await db_session.commit()

    response = await clients_client.put(
        "/admin/schedule",
        json={
            "schedule": {
                "Monday": {"8:00": str(client.id), "9:00": "", "10:00": None},
                "Wednesday": {"18:00": str(client.id)},
            }
        },
    )
    assert response.status_code == 200, response.text
    schedule = response.json()["schedule"]
    assert schedule["Monday"] == {"8:00": str(client.id)}
    assert schedule["Wednesday"] == {"18:00": str(client.id)}

    # Saves replace the whole document
    response = await clients_client.put(
        "/admin/schedule", json={"schedule": {"Friday": {"12:00": str(client.id)}}}
    )
    schedule = (await clients_client.get("/admin/schedule")).json()["schedule"]
    assert schedule["Monday"] == {}
    assert schedule["Friday"] == {"12:00": str(client.id)}


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "grid",
    [
        {"Funday": {"8:00": ""}},
        {"Monday": {"7:00": ""}},
        {"Monday": {"8:30": ""}},
    ],
)
async def test_unknown_day_or_slot_is_rejected(clients_client, grid):
    response = await clients_client.put("/admin/schedule", json={"schedule": grid})
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_client_id_is_rejected(clients_client):
    response = await clients_client.put(
        "/admin/schedule", json={"schedule": {"Monday": {"8:00": str(uuid.uuid4())}}}
    )
    assert response.status_code == 400
    assert "Unknown client ids" in response.json()["detail"]
