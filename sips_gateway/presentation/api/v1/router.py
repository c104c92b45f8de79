from fastapi import APIRouter

from .checkout import checkout_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(checkout_router, tags=["Checkout"])
