from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CarerContact, ClientContact


class ContactRepository(Protocol):
    def get_carers(self, carer_ids: Sequence[int]) -> Sequence[CarerContact]:
        """Carers with the given ids; unknown ids are left out."""

        raise NotImplementedError

    def get_client(self, client_id: int) -> Optional[ClientContact]:
        raise NotImplementedError
