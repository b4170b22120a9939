from services.clients_service.routers.clients import router as clients_router
from services.clients_service.routers.membership import router as membership_router
from services.clients_service.routers.schedule import router as schedule_router

__all__ = ["clients_router", "membership_router", "schedule_router"]
