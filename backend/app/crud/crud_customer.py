"""CRUD operations for customers."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.models.customer import Customer
from backend.app.schemas.customer import CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)


class CRUDCustomer:
    def create(self, db: Session, *, obj_in: CustomerCreate) -> Customer:
        obj = Customer(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        logger.info("Created customer %s (%s)", obj.id, obj.name)
        return obj

    def get(self, db: Session, *, customer_id: int) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.id == customer_id).first()

    def get_multi(self, db: Session, *, status: Optional[str] = None) -> List[Customer]:
        query = db.query(Customer)
        if status:
            query = query.filter(Customer.status == status)
        return query.order_by(Customer.id.asc()).all()

    def update(self, db: Session, *, db_obj: Customer, obj_in: CustomerUpdate) -> Customer:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Customer) -> Customer:
        customer_id = db_obj.id
        db.delete(db_obj)
        db.commit()
        logger.info("Deleted customer %s with its notes", customer_id)
        return db_obj


customer_crud = CRUDCustomer()
