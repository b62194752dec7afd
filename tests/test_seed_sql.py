from __future__ import annotations

from pathlib import Path

import pytest

from care_billing.database import bootstrap

DATABASE_DIR = Path(__file__).resolve().parents[1] / "database"


class _RecordingCursor:
    def __init__(self, statements: list[str]):
        self._statements = statements

    def execute(self, stmt: str) -> None:
        self._statements.append(stmt)


class _RecordingConnection:
    def __init__(self, statements: list[str]):
        self._statements = statements

    def cursor(self):
        return _RecordingCursor(self._statements)

    def commit(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.fixture
def executed(monkeypatch) -> list[str]:
    statements: list[str] = []

    class _Factory:
        def __init__(self, config):
            self.config = config

        def connect(self, *, with_database: bool = True):
            return _RecordingConnection(statements)

    monkeypatch.setattr(bootstrap, "DatabaseConnection", _Factory)
    return statements


def test_seed_upserts_rate_card_by_code(executed):
    bootstrap.apply_seed_sql({"database": "care_billing_test"}, seed_path=DATABASE_DIR / "seed.sql")

    assert not [s for s in executed if s.upper().startswith("DELETE")]
    line_items = [s for s in executed if s.startswith("INSERT INTO line_items")]
    assert len(line_items) == 1
    assert "ON DUPLICATE KEY UPDATE" in line_items[0]


def test_line_item_code_is_unique():
    schema = (DATABASE_DIR / "schema.sql").read_text(encoding="utf-8")

    assert "UNIQUE KEY uq_line_items_code (code)" in schema
