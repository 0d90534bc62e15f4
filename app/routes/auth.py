# app/routes/auth.py
from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_admin, get_current_user, get_user_or_admin
from app.schemas.principal import ResolvedPrincipal

user_router = APIRouter(tags=["Users"])
admin_router = APIRouter(tags=["Admins"])
session_router = APIRouter(tags=["Session"])


@user_router.get("/getcurrent-user")
async def get_current_user_info(principal: ResolvedPrincipal = Depends(get_current_user)):
    return {"success": True, "data": principal.identity.model_dump(by_alias=True)}


@admin_router.post("/getcurrent-admin")
async def get_current_admin_info(principal: ResolvedPrincipal = Depends(get_current_admin)):
    return {"success": True, "data": principal.identity.model_dump(by_alias=True)}


@session_router.get("/current-principal")
async def get_current_principal(principal: ResolvedPrincipal = Depends(get_user_or_admin)):
    return {
        "success": True,
        "userType": principal.role,
        "data": principal.identity.model_dump(by_alias=True),
    }
