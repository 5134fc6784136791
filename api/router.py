from fastapi import APIRouter

from api.routes import auth, bookings, dashboard, doubts, pages

api_router = APIRouter()

api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(dashboard.router, tags=["dashboard"])
api_router.include_router(doubts.router, tags=["doubts"])
api_router.include_router(bookings.router, tags=["bookings"])
api_router.include_router(pages.router, tags=["pages"])
