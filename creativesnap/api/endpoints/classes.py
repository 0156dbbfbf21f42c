"""Class listing endpoints"""

from fastapi import APIRouter, Depends
from pymongo import DESCENDING
import logging

from creativesnap.core.dependencies import get_store
from creativesnap.core.security import verify_token
from creativesnap.core.store import Store, result_to_dict
from creativesnap.schemas.classes import ClassCreate
from creativesnap.utils.documents import to_json

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/classes")
async def create_class(new_class: ClassCreate, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    result = await store.classes.insert_one(new_class.to_document())
    logger.info(f"✓ Class '{new_class.name}' created by {new_class.instructor_email}: {result.inserted_id}")
    return result_to_dict(result)


@router.get("/classes")
async def list_classes(store: Store = Depends(get_store)):
    classes = await store.classes.find({}).to_list(None)
    return to_json(classes)


@router.get("/popular-classes")
async def list_popular_classes(store: Store = Depends(get_store)):
    """All classes, best sellers first"""
    classes = await store.classes.find({}).sort("sell_count", DESCENDING).to_list(None)
    return to_json(classes)


@router.get("/classes/instructor/{email}")
async def list_instructor_classes(email: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    classes = await store.classes.find({"instructor_email": email}).to_list(None)
    return to_json(classes)
