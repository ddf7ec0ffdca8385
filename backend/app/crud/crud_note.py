"""CRUD operations for notes."""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from backend.app.core.clock import TimestampClock
from backend.app.models.note import Note
from backend.app.schemas.note import NoteCreate, NoteUpdate

logger = logging.getLogger(__name__)


class CRUDNote:
    def create(
        self,
        db: Session,
        *,
        obj_in: NoteCreate,
        customer_id: Optional[int] = None,
        clock: Optional[TimestampClock] = None,
    ) -> Note:
        obj = Note.from_string(obj_in.raw, clock=clock, customer_id=customer_id)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        logger.debug("Created note %s for customer %s", obj.id, customer_id)
        return obj

    def create_multi(
        self,
        db: Session,
        *,
        objs_in: Iterable[NoteCreate],
        customer_id: Optional[int] = None,
        clock: Optional[TimestampClock] = None,
    ) -> List[Note]:
        """Create several notes in one commit, in input order."""
        objs = [Note.from_string(obj_in.raw, clock=clock, customer_id=customer_id) for obj_in in objs_in]
        db.add_all(objs)
        db.commit()
        for obj in objs:
            db.refresh(obj)
        logger.debug("Created %d notes for customer %s", len(objs), customer_id)
        return objs

    def get(self, db: Session, *, note_id: int) -> Optional[Note]:
        return db.query(Note).filter(Note.id == note_id).first()

    def get_multi(self, db: Session, *, customer_id: int) -> List[Note]:
        return (
            db.query(Note)
            .filter(Note.customer_id == customer_id)
            .order_by(Note.timestamp.asc(), Note.id.asc())
            .all()
        )

    def update_text(self, db: Session, *, db_obj: Note, obj_in: NoteUpdate) -> Note:
        db_obj.set_text(obj_in.text)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Note) -> Note:
        note_id = db_obj.id
        db.delete(db_obj)
        db.commit()
        logger.info("Deleted note %s", note_id)
        return db_obj


note_crud = CRUDNote()
