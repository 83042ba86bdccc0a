# -*- coding: utf-8 -*-
"""
Creates the pre-provisioned administrator if it does not exist yet.
Runs at application startup and can also be run by hand.
"""

import logging

from college_events import config
from college_events.auth import get_password_hash
from college_events.database import SessionLocal
from college_events.models.admin import Admin


def create_first_admin(username=None, password=None):
    username = (username or config.ADMIN_USERNAME).strip()
    password = password or str(config.ADMIN_PASSWORD)

    db = SessionLocal()
    try:
        admin = db.query(Admin).filter(Admin.username == username).first()
        if admin is None:
            db.add(Admin(username=username, hashed_password=get_password_hash(password)))
            db.commit()
            logging.info(f"Administrator '{username}' created")
        else:
            logging.info(f"Administrator '{username}' already exists")
    except Exception:
        db.rollback()
        logging.exception(f"Could not create administrator '{username}'")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    from college_events.database import Base, engine
    Base.metadata.create_all(bind=engine)
    create_first_admin()
