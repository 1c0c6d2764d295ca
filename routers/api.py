from fastapi import APIRouter
from routers.v1.auth_router import auth_router
from routers.v1.class_router import class_router
from routers.v1.user_router import user_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(user_router)
router.include_router(class_router)
