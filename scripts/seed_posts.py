#!/usr/bin/env python3
"""
Create the posts table and load the demonstration rows.

Uso:
  python scripts/seed_posts.py [--reset]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote api seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings
from api.core.logging_config import configure_logging
from api.db.create_tables import create_all, drop_all
from api.db.seed import seed_posts
from api.db.session import get_sessionmaker


def main() -> None:
    ap = argparse.ArgumentParser(description="Load seed posts into the database")
    ap.add_argument("--reset", action="store_true", help="Drop and recreate the posts table first")
    args = ap.parse_args()

    configure_logging(get_settings().log_level)
    if args.reset:
        drop_all()
    create_all()
    inserted = seed_posts(get_sessionmaker())
    print(f"OK: {inserted} posts inseridos")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
