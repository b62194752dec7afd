"""Example: price a shift through the service layer (no Flask).

Controllers are a thin layer; the pricing rules live in services/costing.
"""

import importlib

from care_billing.config import get_settings_module
from care_billing.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    allocation = container.shift_service.quote(
        shift_date="2025-01-08",
        start_time="16:00",
        end_time="21:00",
        category="Personal Care",
    )
    for line in allocation.breakdown:
        print(f"{line.code:<18} {line.hours:>5.2f}h x {line.rate:>7.2f} = {line.cost:>8.2f}")
    print(f"Total: {allocation.total:.2f}")


if __name__ == "__main__":
    main()
