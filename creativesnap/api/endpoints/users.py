# ============================================================================
# FILE: creativesnap/api/endpoints/users.py
# ============================================================================
"""User endpoints - registration, lookup, instructors and role changes"""

from fastapi import APIRouter, Depends
from pymongo import DESCENDING
import logging

from creativesnap.core.dependencies import get_store
from creativesnap.core.security import verify_token
from creativesnap.core.store import Store, result_to_dict
from creativesnap.schemas.users import Role, UserUpsert
from creativesnap.utils.documents import maybe_json, object_id, to_json

logger = logging.getLogger(__name__)
router = APIRouter()


@router.put("/users/{email}")
async def upsert_user(email: str, user: UserUpsert, store: Store = Depends(get_store)):
    """Create or overwrite the profile fields of the user with this email"""
    result = await store.users.update_one(
        {"email": email},
        {
            "$set": user.to_set_fields(email),
            "$setOnInsert": {"sell_count": 0},
        },
        upsert=True,
    )
    logger.info(f"✓ Upserted user {email}")
    return result_to_dict(result)


@router.get("/users")
async def list_users(store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    users = await store.users.find({}).to_list(None)
    return to_json(users)


@router.get("/users/{email}")
async def get_user(email: str, store: Store = Depends(get_store)):
    """Look up one user; answers null when no user has this email"""
    user = await store.users.find_one({"email": email})
    return maybe_json(user)


@router.get("/instructors")
async def list_instructors(store: Store = Depends(get_store)):
    instructors = await store.users.find({"role": Role.INSTRUCTOR.value}).to_list(None)
    return to_json(instructors)


@router.get("/popular-instructors")
async def list_popular_instructors(store: Store = Depends(get_store)):
    """Instructors, best sellers first"""
    instructors = await (
        store.users.find({"role": Role.INSTRUCTOR.value})
        .sort("sell_count", DESCENDING)
        .to_list(None)
    )
    return to_json(instructors)


async def _set_role(store: Store, user_id: str, role: Role) -> dict:
    result = await store.users.update_one(
        {"_id": object_id(user_id)},
        {"$set": {"role": role.value}},
    )
    logger.info(f"✓ User {user_id} role set to {role.value} (matched {result.matched_count})")
    return result_to_dict(result)


@router.patch("/users/admin/{user_id}")
async def make_admin(user_id: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    return await _set_role(store, user_id, Role.ADMIN)


@router.patch("/users/instructor/{user_id}")
async def make_instructor(user_id: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    return await _set_role(store, user_id, Role.INSTRUCTOR)


@router.delete("/users/{user_id}")
async def delete_user(user_id: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    result = await store.users.delete_one({"_id": object_id(user_id)})
    logger.info(f"🗑 Deleted user {user_id} ({result.deleted_count})")
    return result_to_dict(result)
