"""Customer note services: attach, import and export externalized notes."""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from backend.app.core.clock import TimestampClock
from backend.app.core.exceptions import CustomerNotFoundError
from backend.app.crud.crud_customer import customer_crud
from backend.app.crud.crud_note import note_crud
from backend.app.models.customer import Customer
from backend.app.models.note import Note
from backend.app.schemas.note import NoteCreate

logger = logging.getLogger(__name__)


def _get_customer(db: Session, customer_id: int) -> Customer:
    customer = customer_crud.get(db, customer_id=customer_id)
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    return customer


def add_note(db: Session, customer_id: int, raw: str, clock: Optional[TimestampClock] = None) -> Note:
    customer = _get_customer(db, customer_id)
    return note_crud.create(db, obj_in=NoteCreate(raw=raw), customer_id=customer.id, clock=clock)


def import_notes(
    db: Session,
    customer_id: int,
    lines: Iterable[str],
    clock: Optional[TimestampClock] = None,
) -> List[Note]:
    """Add one note per non-blank line; lines keep their own timestamps when they carry one."""
    customer = _get_customer(db, customer_id)
    entries = [NoteCreate(raw=line.rstrip("\r\n")) for line in lines if line.strip()]
    notes = note_crud.create_multi(db, objs_in=entries, customer_id=customer.id, clock=clock)
    logger.info("Imported %d notes for customer %s", len(notes), customer.id)
    return notes


def export_notes(db: Session, customer_id: int) -> List[str]:
    customer = _get_customer(db, customer_id)
    return [note.externalize() for note in note_crud.get_multi(db, customer_id=customer.id)]
