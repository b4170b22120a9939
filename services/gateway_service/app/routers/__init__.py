from services.gateway_service.app.routers.dashboard import router as dashboard_router

__all__ = ["dashboard_router"]
