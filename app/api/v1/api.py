from fastapi import APIRouter

from app.api.v1.routes_auth import router as auth_router
from app.api.v1.routes_categories import router as categories_router
from app.api.v1.routes_expenses import router as expenses_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(expenses_router, prefix="/expenses", tags=["expenses"])
