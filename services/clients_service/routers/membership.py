from fastapi import APIRouter, Depends, Request
from libs.common.rate_limit import public_limit
from libs.db.session import get_async_db
from services.clients_service.schemas import MembershipLookupResponse
from services.clients_service.services.lookup import lookup_membership
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["membership"])


@router.get(
    "/membership/{code}",
    response_model=MembershipLookupResponse,
    response_model_exclude_none=True,
)
@public_limit
async def get_membership(
    request: Request,
    code: str,
    db: AsyncSession = Depends(get_async_db),
):
    """
    Public membership card lookup by code (case-insensitive).
    Unknown codes return ``{"found": false}``.
    """
    return await lookup_membership(db, code)
