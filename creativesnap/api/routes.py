"""Main API router"""

from fastapi import APIRouter

from creativesnap.api.endpoints import auth, cards, classes, payments, users

router = APIRouter()

router.include_router(auth.router, tags=["Auth"])
router.include_router(users.router, tags=["Users"])
router.include_router(classes.router, tags=["Classes"])
router.include_router(cards.router, tags=["Cards"])
router.include_router(payments.router, tags=["Payments"])
