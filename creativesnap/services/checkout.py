"""Checkout - turns a cart item into a payment record plus seat/sales bookkeeping"""

from datetime import datetime, timezone
from typing import Optional
import logging

from pymongo import ReturnDocument

from creativesnap.core.errors import InvalidArgument, InvalidState
from creativesnap.core.store import Store, result_to_dict
from creativesnap.schemas.payments import PaymentCreate
from creativesnap.utils.documents import object_id

logger = logging.getLogger(__name__)


async def _resolve_class_id(store: Store, payment: PaymentCreate) -> str:
    """The purchased class comes from the payload, else from the cart item"""
    if payment.classId:
        return payment.classId
    card = await store.cards.find_one({"_id": object_id(payment.itemId)})
    if card and card.get("classId"):
        return card["classId"]
    raise InvalidArgument("classId is required")


async def _resolve_instructor_email(store: Store, class_id, payment: PaymentCreate) -> str:
    """The sale is credited to the class's instructor, else the payload's"""
    purchased = await store.classes.find_one({"_id": class_id})
    instructor_email: Optional[str] = (purchased or {}).get("instructor_email") or payment.instructor_email
    if not instructor_email:
        raise InvalidArgument("instructor_email is required")
    return instructor_email


async def checkout(store: Store, payment: PaymentCreate) -> dict:
    """Record a payment and apply its side effects atomically.

    Steps, all inside one transaction:
    1. Reserve a seat on the class (atomic $inc guarded by Available_seats > 0)
    2. Insert the payment record
    3. Delete the purchased cart item
    4. Credit the instructor's sell_count
    A rejected or failed step aborts the whole transaction.
    """
    item_id = object_id(payment.itemId)
    class_id = object_id(await _resolve_class_id(store, payment))

    if payment.Available_seats <= 0:
        raise InvalidState("No available seats")

    instructor_email = await _resolve_instructor_email(store, class_id, payment)

    record = payment.model_dump(exclude_unset=True)
    record.pop("_id", None)
    record["classId"] = str(class_id)
    record["date"] = payment.date or datetime.now(timezone.utc)

    async def _apply(session) -> dict:
        purchased = await store.classes.find_one_and_update(
            {"_id": class_id, "Available_seats": {"$gt": 0}},
            {"$inc": {"Available_seats": -1, "sell_count": 1}},
            return_document=ReturnDocument.AFTER,
            session=session,
        )
        if purchased is None:
            raise InvalidState("No available seats")
        logger.info(f"✓ Seat reserved on class {class_id}, {purchased.get('Available_seats')} left")

        # Retried transactions must not carry the previous attempt's _id
        inserted = await store.payments.insert_one(dict(record), session=session)
        logger.info(f"✓ Payment recorded: {inserted.inserted_id}")

        deleted = await store.cards.delete_one({"_id": item_id}, session=session)
        if deleted.deleted_count != 1:
            raise InvalidState("Cart item not found")

        credited = await store.users.update_one(
            {"email": instructor_email},
            {"$inc": {"sell_count": 1}},
            upsert=True,
            session=session,
        )

        return {
            "insertResult": result_to_dict(inserted),
            "deleteResult": result_to_dict(deleted),
            "classResult": {
                "acknowledged": True,
                "matchedCount": 1,
                "modifiedCount": 1,
                "Available_seats": purchased.get("Available_seats"),
                "sell_count": purchased.get("sell_count"),
            },
            "userResult": result_to_dict(credited),
        }

    logger.info(f"🔄 Checkout for {payment.email}: item {item_id}, class {class_id}")
    result = await store.run_transaction(_apply)
    logger.info(f"✓ Checkout complete for {payment.email}")
    return result
