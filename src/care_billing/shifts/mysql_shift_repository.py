from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import ShiftRecord, ShiftReportRow
from .repository import ShiftRepository


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, shift_id: int) -> Optional[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_date, time_from, time_to, carer_id, client_id,
                       category, line_item_id, cost
                FROM shifts
                WHERE shift_id=%s
                """,
                (int(shift_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return ShiftRecord(
                shift_id=int(r["shift_id"]),
                shift_date=r["shift_date"],
                time_from=r["time_from"],
                time_to=r["time_to"],
                carer_id=int(r["carer_id"]),
                client_id=int(r["client_id"]) if r.get("client_id") is not None else None,
                category=r["category"],
                line_item_id=int(r["line_item_id"]) if r.get("line_item_id") is not None else None,
                cost=to_float(r.get("cost")) or 0.0,
            )

    def create(
        self,
        *,
        shift_date: date,
        time_from: datetime,
        time_to: datetime,
        carer_id: int,
        category: str,
        cost: float,
        client_id: Optional[int] = None,
        line_item_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(shift_date, time_from, time_to, carer_id, client_id, category, line_item_id, cost)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (shift_date, time_from, time_to, int(carer_id), client_id, category, line_item_id, cost),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        shift_id: int,
        shift_date: date,
        time_from: datetime,
        time_to: datetime,
        carer_id: int,
        category: str,
        cost: float,
        client_id: Optional[int] = None,
        line_item_id: Optional[int] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET shift_date=%s, time_from=%s, time_to=%s, carer_id=%s, client_id=%s,
                    category=%s, line_item_id=%s, cost=%s
                WHERE shift_id=%s
                """,
                (shift_date, time_from, time_to, int(carer_id), client_id, category, line_item_id, cost, int(shift_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        carer_ids: Optional[Sequence[int]] = None,
        client_id: Optional[int] = None,
    ) -> Sequence[ShiftReportRow]:
        clauses = ["s.shift_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if carer_ids:
            placeholders = ",".join(["%s"] * len(carer_ids))
            clauses.append(f"s.carer_id IN ({placeholders})")
            params.extend(int(c) for c in carer_ids)
        if client_id is not None:
            clauses.append("s.client_id=%s")
            params.append(int(client_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    s.shift_id,
                    s.shift_date,
                    s.time_from,
                    s.time_to,
                    s.carer_id,
                    CONCAT(c.first_name, ' ', c.last_name) AS carer_name,
                    s.client_id,
                    s.category,
                    s.cost,
                    li.line_item_id,
                    li.code AS line_item_code,
                    li.description AS line_item_description,
                    li.category AS line_item_category,
                    li.billed_rate
                FROM shifts s
                JOIN carers c ON c.carer_id = s.carer_id
                LEFT JOIN line_items li ON li.line_item_id = s.line_item_id
                WHERE {where}
                ORDER BY s.shift_date ASC, s.time_from ASC
                """,
                tuple(params),
            )
            return [
                ShiftReportRow(
                    shift_id=int(r["shift_id"]),
                    shift_date=r["shift_date"],
                    time_from=r["time_from"],
                    time_to=r["time_to"],
                    carer_id=int(r["carer_id"]),
                    carer_name=r.get("carer_name") or "",
                    client_id=int(r["client_id"]) if r.get("client_id") is not None else None,
                    category=r.get("category"),
                    cost=to_float(r.get("cost")),
                    line_item_id=int(r["line_item_id"]) if r.get("line_item_id") is not None else None,
                    line_item_code=r.get("line_item_code"),
                    line_item_description=r.get("line_item_description"),
                    line_item_category=r.get("line_item_category"),
                    billed_rate=to_float(r.get("billed_rate")),
                )
                for r in fetchall(cur)
            ]
