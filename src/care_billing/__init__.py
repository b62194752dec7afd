"""Care Shift Billing package.

Feature modules (costing, line_items, shifts, reports, invoices) follow the
same layering: a pure domain core, Protocol repositories with MySQL
implementations, services, and thin Flask controllers.
"""
