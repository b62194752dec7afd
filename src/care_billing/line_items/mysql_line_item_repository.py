from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, to_float
from .model import RateCardLineItem
from .repository import LineItemRepository


class MySQLLineItemRepository(LineItemRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_category(self, category: str) -> Sequence[RateCardLineItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT line_item_id, code, category, description, billed_rate,
                       time_from, time_to, weekday, saturday, sunday, sleepover
                FROM line_items
                WHERE category=%s
                ORDER BY code
                """,
                (category,),
            )
            return [self._to_model(r) for r in fetchall(cur)]

    def list_categories(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT category
                FROM line_items
                WHERE category IS NOT NULL
                ORDER BY category
                """
            )
            return [r["category"] for r in fetchall(cur)]

    def get_by_code(self, code: str) -> Optional[RateCardLineItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT line_item_id, code, category, description, billed_rate,
                       time_from, time_to, weekday, saturday, sunday, sleepover
                FROM line_items
                WHERE code=%s
                ORDER BY line_item_id
                LIMIT 1
                """,
                (code,),
            )
            r = fetchone(cur)
            return self._to_model(r) if r else None

    @staticmethod
    def _to_model(r: dict) -> RateCardLineItem:
        return RateCardLineItem(
            line_item_id=int(r["line_item_id"]),
            code=r.get("code"),
            category=r["category"],
            description=r.get("description"),
            billed_rate=to_float(r.get("billed_rate")),
            time_from=normalize_mysql_time(r.get("time_from")),
            time_to=normalize_mysql_time(r.get("time_to")),
            weekday=bool(r.get("weekday")),
            saturday=bool(r.get("saturday")),
            sunday=bool(r.get("sunday")),
            sleepover=bool(r.get("sleepover")),
        )
