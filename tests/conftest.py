from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config
from api.db import session as db_session
from api.db import models


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session.get_sessionmaker.cache_clear()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo para não deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db3"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("SEED_ON_STARTUP", "0")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()
