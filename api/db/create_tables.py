"""Create or drop the posts schema."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def drop_all() -> None:
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Manage the posts schema")
    ap.add_argument("--drop", action="store_true", help="Drop the tables instead of creating them")
    args = ap.parse_args()
    try:
        if args.drop:
            drop_all()
            print("Database tables dropped successfully.")
        else:
            create_all()
            print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to update schema: {exc}") from exc
