# Customer Notes back end entrypoint: prepare the database and print each customer's notes.

import argparse
import logging

from backend.app.core.dev_seed import ensure_demo_customer
from backend.app.core.exceptions import CustomerNotFoundError
from backend.app.core.logging_config import configure_logging
from backend.app.core.settings import get_settings
from backend.app.db.init_db import init_db
from backend.app.db.session import SessionLocal
from backend.app.services.customer_notes import export_notes
from backend.app.crud.crud_customer import customer_crud

logger = logging.getLogger(__name__)


def startup():
    settings = get_settings()
    configure_logging(settings)
    init_db()
    if settings.environment == "development":
        db = SessionLocal()
        try:
            ensure_demo_customer(db)
        finally:
            db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the database and list externalized customer notes.")
    parser.add_argument("--customer", type=int, default=None, help="only list notes of this customer id")
    args = parser.parse_args(argv)

    startup()
    db = SessionLocal()
    try:
        if args.customer is not None:
            customer_ids = [args.customer]
        else:
            customer_ids = [c.id for c in customer_crud.get_multi(db)]
        for customer_id in customer_ids:
            try:
                lines = export_notes(db, customer_id)
            except CustomerNotFoundError as exc:
                logger.error("%s", exc)
                return 1
            for line in lines:
                print(f"{customer_id}\t{line}")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
