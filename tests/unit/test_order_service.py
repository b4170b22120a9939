"""Unit tests for order approval helpers, called directly with db_session."""

import uuid

import pytest
from services.orders_service.services import order_service
from tests.factories import ClientFactory


@pytest.mark.asyncio
@pytest.mark.unit
async def test_new_client_identity_skips_taken_codes(db_session, monkeypatch):
    taken_id = uuid.UUID("aaaaaaaa-0000-4000-8000-000000000001")
    db_session.add(ClientFactory.create(id=taken_id))
    await db_session.commit()

    candidates = iter(
        [
            uuid.UUID("aaaaaaaa-1111-4000-8000-000000000002"),
            uuid.UUID("bbbbbbbb-2222-4000-8000-000000000003"),
        ]
    )
    monkeypatch.setattr(order_service.uuid, "uuid4", lambda: next(candidates))

    client_id, code = await order_service._new_client_identity(db_session)

    assert code == "BBBBBBBB"
    assert client_id == uuid.UUID("bbbbbbbb-2222-4000-8000-000000000003")
