from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CarerContact:
    """Carer details printed in an invoice header."""

    carer_id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    abn: Optional[str] = None
    account_name: Optional[str] = None
    bsb: Optional[str] = None
    account_number: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def as_dict(self) -> dict:
        return {
            "carer_id": self.carer_id,
            "name": self.full_name,
            "address": self.address or "",
            "mobile": self.phone_number or "",
            "email": self.email or "",
            "abn": self.abn or "",
            "account_name": self.account_name or "",
            "bsb": self.bsb or "",
            "account_number": self.account_number or "",
        }


@dataclass(frozen=True)
class ClientContact:
    client_id: int
    first_name: str
    last_name: str
    ndis_number: Optional[str] = None
    address: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def address_lines(self) -> tuple[str, str]:
        """Stored address split on its first line break."""
        lines = (self.address or "").split("\n")
        first = lines[0].strip()
        second = lines[1].strip() if len(lines) > 1 else ""
        return first, second

    def as_dict(self) -> dict:
        line1, line2 = self.address_lines
        return {
            "client_id": self.client_id,
            "name": self.full_name,
            "ndis_number": self.ndis_number or "",
            "address_line1": line1,
            "address_line2": line2,
        }
