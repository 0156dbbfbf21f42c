"""Cart endpoints"""

from fastapi import APIRouter, Depends
import logging

from creativesnap.core.dependencies import get_store
from creativesnap.core.security import ensure_same_email, verify_token
from creativesnap.core.store import Store, result_to_dict
from creativesnap.schemas.cards import CardCreate
from creativesnap.utils.documents import maybe_json, object_id, to_json

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/cards")
async def add_card(card: CardCreate, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    result = await store.cards.insert_one(card.to_document())
    logger.info(f"🛒 {card.user_email} added {card.classId} to cart: {result.inserted_id}")
    return result_to_dict(result)


@router.get("/cards/single/{card_id}")
async def get_card(card_id: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    """One cart item by id; null when it does not exist"""
    card = await store.cards.find_one({"_id": object_id(card_id)})
    return maybe_json(card)


@router.get("/cards/{email}")
async def list_cards(email: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    ensure_same_email(decoded, email)
    cards = await store.cards.find({"user_email": email}).to_list(None)
    return to_json(cards)


@router.delete("/cards/{card_id}")
async def delete_card(card_id: str, store: Store = Depends(get_store), decoded: dict = Depends(verify_token)):
    result = await store.cards.delete_one({"_id": object_id(card_id)})
    logger.info(f"🗑 Removed cart item {card_id} ({result.deleted_count})")
    return result_to_dict(result)
