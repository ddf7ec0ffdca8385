import logging
import os

from sqlalchemy.orm import Session

from backend.app.models.customer import Customer
from backend.app.models.note import Note

logger = logging.getLogger(__name__)

DEMO_CUSTOMER_NAME = "Eric Meyer"
DEMO_NOTES = [
    "2018-04-02 10:16:24.868;; Customer created",
    "Prefers contact by email.",
]


def ensure_demo_customer(db: Session) -> None:
    """
    Create a demo customer with a couple of notes for local development if it does not exist.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    existing = db.query(Customer).filter(Customer.name == DEMO_CUSTOMER_NAME).first()
    if existing:
        return

    customer = Customer(name=DEMO_CUSTOMER_NAME, contact="eric@example.com", status="active")
    customer.notes = [Note.from_string(line) for line in DEMO_NOTES]
    db.add(customer)
    db.commit()
    logger.info("Seeded demo customer %s", customer.id)
