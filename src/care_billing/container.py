from __future__ import annotations

from dataclasses import dataclass

from .contacts.mysql_contact_repository import MySQLContactRepository
from .contacts.repository import ContactRepository
from .costing.factory import CostingStrategyFactory
from .database.connection import DatabaseConnection, DBConfig
from .invoices.service import InvoiceService
from .line_items.mysql_line_item_repository import MySQLLineItemRepository
from .line_items.repository import LineItemRepository
from .reports.service import ShiftReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    line_items_repo: LineItemRepository
    shifts_repo: ShiftRepository
    contacts_repo: ContactRepository

    shift_service: ShiftService
    report_service: ShiftReportService
    invoice_service: InvoiceService


def build_services(
    *,
    line_items_repo: LineItemRepository,
    shifts_repo: ShiftRepository,
    contacts_repo: ContactRepository,
) -> Container:
    shift_service = ShiftService(shifts_repo, line_items_repo, strategy_factory=CostingStrategyFactory())
    report_service = ShiftReportService(shifts_repo, line_items_repo)
    invoice_service = InvoiceService(shifts_repo, contacts_repo)

    return Container(
        line_items_repo=line_items_repo,
        shifts_repo=shifts_repo,
        contacts_repo=contacts_repo,
        shift_service=shift_service,
        report_service=report_service,
        invoice_service=invoice_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        line_items_repo=MySQLLineItemRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        contacts_repo=MySQLContactRepository(conn),
    )
