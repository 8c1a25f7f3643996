from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    CUSTOMER = "customer"


class OrderStatus(str, Enum):
    """Order progression. Transitions are not enforced."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    PAID = "paid"


class EmployeeStatus(str, Enum):
    PERMANENT = "permanent"
    INTERN = "intern"


class ReportType(str, Enum):
    """Direction of a financial report entry; amounts are always positive."""

    INCOME = "income"
    EXPENSE = "expense"
