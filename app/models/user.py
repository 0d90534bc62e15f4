# app/models/user.py
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ConfigDict, Field

from app.database import admin_collection, user_collection

# Never loaded into a resolved principal.
SENSITIVE_FIELDS = {"password": 0, "refreshToken": 0, "accessToken": 0}


class Account(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    userName: str
    # Stored data, not input: no format check.
    email: str


class User(Account):
    fullName: Optional[str] = None
    mobileNumber: Optional[str] = None
    isActive: bool = True


class Admin(Account):
    companyName: Optional[str] = None
    mobileNumber: Optional[str] = None


def _object_id(value) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


async def _find_by_id(collection, principal_id):
    object_id = _object_id(principal_id)
    if object_id is None:
        return None
    document = await collection.find_one({"_id": object_id}, SENSITIVE_FIELDS)
    if document is None:
        return None
    document["_id"] = str(document["_id"])
    return document


async def find_user_by_id(user_id, collection=user_collection) -> Optional[User]:
    document = await _find_by_id(collection, user_id)
    return User(**document) if document else None


async def find_admin_by_id(admin_id, collection=admin_collection) -> Optional[Admin]:
    document = await _find_by_id(collection, admin_id)
    return Admin(**document) if document else None
