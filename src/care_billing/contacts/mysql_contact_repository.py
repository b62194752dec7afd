from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import CarerContact, ClientContact
from .repository import ContactRepository


class MySQLContactRepository(ContactRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_carers(self, carer_ids: Sequence[int]) -> Sequence[CarerContact]:
        if not carer_ids:
            return []

        placeholders = ",".join(["%s"] * len(carer_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT carer_id, first_name, last_name, email, phone_number, address, abn,
                       account_name, bsb, account_number
                FROM carers
                WHERE carer_id IN ({placeholders})
                """,
                tuple(int(c) for c in carer_ids),
            )
            return [
                CarerContact(
                    carer_id=int(r["carer_id"]),
                    first_name=r.get("first_name") or "",
                    last_name=r.get("last_name") or "",
                    email=r.get("email"),
                    phone_number=r.get("phone_number"),
                    address=r.get("address"),
                    abn=r.get("abn"),
                    account_name=r.get("account_name"),
                    bsb=r.get("bsb"),
                    account_number=r.get("account_number"),
                )
                for r in fetchall(cur)
            ]

    def get_client(self, client_id: int) -> Optional[ClientContact]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT client_id, first_name, last_name, ndis_number, address
                FROM clients
                WHERE client_id=%s
                """,
                (int(client_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return ClientContact(
                client_id=int(r["client_id"]),
                first_name=r.get("first_name") or "",
                last_name=r.get("last_name") or "",
                ndis_number=str(r["ndis_number"]) if r.get("ndis_number") is not None else None,
                address=r.get("address"),
            )
