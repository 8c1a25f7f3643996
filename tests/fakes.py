"""In-memory repositories shared by the service and HTTP tests."""
from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from werkzeug.security import generate_password_hash

from src.laundry_zone.laundry_zone.catalog.model import Service
from src.laundry_zone.laundry_zone.container import Container, assemble
from src.laundry_zone.laundry_zone.core.enums import EmployeeStatus, OrderStatus, ReportType, Role
from src.laundry_zone.laundry_zone.core.exceptions import StoreError, ValidationError
from src.laundry_zone.laundry_zone.employees.model import Employee
from src.laundry_zone.laundry_zone.finance.model import FinancialReport
from src.laundry_zone.laundry_zone.orders.model import OrderView
from src.laundry_zone.laundry_zone.statistics.model import OrderRow, ReportRow, ServiceRow
from src.laundry_zone.laundry_zone.users.model import User

JWT_SECRET = "test-jwt-secret"


def new_id() -> str:
    return str(uuid.uuid4())


class InMemoryUsers:
    def __init__(self):
        self.users: dict[str, User] = {}
        self.fail_writes = False

    def add(self, *, username: str, password: str, role: Role = Role.CUSTOMER, name=None, phone=None) -> User:
        user = User(
            id=new_id(),
            username=username,
            password_hash=generate_password_hash(password),
            role=role,
            name=name,
            phone=phone,
            created_at=datetime(2026, 1, 1, 9, 0).isoformat(),
        )
        self.users[user.id] = user
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def get_customer_by_phone(self, phone: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.phone == phone and u.role is Role.CUSTOMER), None)

    def list_customers(self):
        return [u for u in reversed(list(self.users.values())) if u.role is Role.CUSTOMER]

    def create_customer(self, *, username, password_hash, name, phone, address) -> User:
        if self.fail_writes:
            raise StoreError("connection lost")
        if self.get_by_username(username) or self.get_customer_by_phone(phone):
            raise ValidationError("Record already exists")
        user = User(
            id=new_id(),
            username=username,
            password_hash=password_hash,
            role=Role.CUSTOMER,
            name=name,
            phone=phone,
            address=address,
        )
        self.users[user.id] = user
        return user

    def create_customer_if_absent(self, *, username, password_hash, name, phone, address) -> User:
        try:
            return self.create_customer(
                username=username, password_hash=password_hash, name=name, phone=phone, address=address
            )
        except ValidationError:
            existing = self.get_customer_by_phone(phone)
            if existing:
                return existing
            raise

    def update_customer(self, user_id, *, name, phone, address) -> bool:
        user = self.users.get(user_id)
        if not user or user.role is not Role.CUSTOMER:
            return False
        self.users[user_id] = replace(user, name=name, phone=phone, address=address)
        return True

    def delete_customer(self, user_id) -> bool:
        user = self.users.get(user_id)
        if not user or user.role is not Role.CUSTOMER:
            return False
        del self.users[user_id]
        return True

    def update_password(self, user_id, *, password_hash) -> bool:
        user = self.users.get(user_id)
        if not user:
            return False
        self.users[user_id] = replace(user, password_hash=password_hash)
        return True

    def count_customers(self) -> int:
        return len(self.list_customers())


class InMemoryServices:
    def __init__(self):
        self.services: dict[str, Service] = {}

    def add(self, *, name: str, price_per_kg: float, estimated_hours: int, description=None) -> Service:
        service = Service(
            id=new_id(), name=name, price_per_kg=price_per_kg, estimated_hours=estimated_hours, description=description
        )
        self.services[service.id] = service
        return service

    def list_all(self):
        return list(reversed(list(self.services.values())))

    def get_by_id(self, service_id):
        return self.services.get(service_id)

    def create(self, *, name, price_per_kg, estimated_hours, description) -> str:
        return self.add(name=name, price_per_kg=price_per_kg, estimated_hours=estimated_hours, description=description).id

    def update(self, service_id, *, name, price_per_kg, estimated_hours, description) -> bool:
        service = self.services.get(service_id)
        if not service:
            return False
        self.services[service_id] = replace(
            service, name=name, price_per_kg=price_per_kg, estimated_hours=estimated_hours, description=description
        )
        return True

    def delete(self, service_id) -> bool:
        return self.services.pop(service_id, None) is not None


class InMemoryEmployees:
    def __init__(self):
        self.employees: dict[str, Employee] = {}

    def list_all(self):
        return list(reversed(list(self.employees.values())))

    def create(self, *, name, phone, status: EmployeeStatus, hire_date: Optional[date]) -> str:
        employee = Employee(
            id=new_id(), name=name, phone=phone, status=status, hire_date=hire_date.isoformat() if hire_date else None
        )
        self.employees[employee.id] = employee
        return employee.id

    def update(self, employee_id, *, name, phone, status, hire_date) -> bool:
        employee = self.employees.get(employee_id)
        if not employee:
            return False
        self.employees[employee_id] = replace(
            employee, name=name, phone=phone, status=status, hire_date=hire_date.isoformat() if hire_date else None
        )
        return True

    def delete(self, employee_id) -> bool:
        return self.employees.pop(employee_id, None) is not None

    def count(self) -> int:
        return len(self.employees)


class InMemoryOrders:
    """Stores raw order rows and joins names at read time, like the SQL view."""

    def __init__(self, users: InMemoryUsers, services: InMemoryServices):
        self._users = users
        self._services = services
        self.rows: dict[str, dict] = {}
        self.fail_writes = False

    def _view(self, row: dict) -> OrderView:
        customer = self._users.get_by_id(row["customer_id"])
        service = self._services.get_by_id(row["service_id"])
        return OrderView(
            id=row["id"],
            customer_id=row["customer_id"],
            service_id=row["service_id"],
            customer_name=(customer.name if customer else None) or "",
            customer_phone=(customer.phone if customer else None) or "",
            service_name=(service.name if service else None) or "",
            weight=row["weight"],
            total_price=row["total_price"],
            status=row["status"],
            estimated_completion=row["estimated_completion"],
            created_at=row["created_at"],
        )

    def list_views(self):
        rows = sorted(self.rows.values(), key=lambda r: r["created_at"] or "", reverse=True)
        return [self._view(r) for r in rows]

    def list_views_for_customer(self, customer_id):
        return [v for v in self.list_views() if v.customer_id == customer_id]

    def create(self, *, customer_id, service_id, weight, total_price, status, estimated_completion, created_at) -> str:
        if self.fail_writes:
            raise StoreError("Deadlock found when trying to get lock")
        order_id = new_id()
        self.rows[order_id] = {
            "id": order_id,
            "customer_id": customer_id,
            "service_id": service_id,
            "weight": weight,
            "total_price": total_price,
            "status": status,
            "estimated_completion": estimated_completion.isoformat(),
            "created_at": created_at.isoformat() if isinstance(created_at, datetime) else created_at,
        }
        return order_id

    def update_status(self, order_id, status: OrderStatus) -> bool:
        if order_id not in self.rows:
            return False
        self.rows[order_id]["status"] = status
        return True

    def delete(self, order_id) -> bool:
        return self.rows.pop(order_id, None) is not None


class InMemoryReports:
    def __init__(self):
        self.reports: dict[str, FinancialReport] = {}

    def add(self, type: ReportType, amount: float, day, description: str = "entry") -> FinancialReport:
        report = FinancialReport(id=new_id(), type=type, amount=amount, description=description, date=day)
        self.reports[report.id] = report
        return report

    def list_all(self):
        return sorted(self.reports.values(), key=lambda r: r.date or "", reverse=True)

    def get_by_id(self, report_id):
        return self.reports.get(report_id)

    def create(self, *, type, amount, description, date, created_at) -> FinancialReport:
        report = FinancialReport(
            id=new_id(),
            type=type,
            amount=amount,
            description=description,
            date=date.isoformat(),
            created_at=created_at.isoformat(),
        )
        self.reports[report.id] = report
        return report

    def update(self, report_id, *, type, amount, description, date, updated_at):
        report = self.reports.get(report_id)
        if not report:
            return None
        report = replace(
            report, type=type, amount=amount, description=description, date=date.isoformat(),
            updated_at=updated_at.isoformat(),
        )
        self.reports[report_id] = report
        return report

    def delete(self, report_id) -> bool:
        return self.reports.pop(report_id, None) is not None


class InMemoryStatistics:
    """Reads straight through the other fakes so statistics see every write."""

    def __init__(self, users, services, employees, orders, reports):
        self._users = users
        self._services = services
        self._employees = employees
        self._orders = orders
        self._reports = reports

    def order_rows(self):
        return [OrderRow(r["created_at"], r["service_id"]) for r in self._orders.rows.values()]

    def service_rows(self):
        return [ServiceRow(s.id, s.name) for s in self._services.services.values()]

    def report_rows(self):
        return [ReportRow(r.date, r.type.value, r.amount) for r in self._reports.reports.values()]

    def count_orders(self) -> int:
        return len(self._orders.rows)

    def count_customers(self) -> int:
        return self._users.count_customers()

    def count_employees(self) -> int:
        return self._employees.count()


class FakeStore:
    """Bundle of in-memory repositories plus a container wired on top of them."""

    def __init__(self, *, clock=None):
        self.users = InMemoryUsers()
        self.services = InMemoryServices()
        self.employees = InMemoryEmployees()
        self.orders = InMemoryOrders(self.users, self.services)
        self.reports = InMemoryReports()
        self.statistics = InMemoryStatistics(self.users, self.services, self.employees, self.orders, self.reports)
        extra = {"clock": clock} if clock else {}
        self.container: Container = assemble(
            conn=None,
            users_repo=self.users,
            services_repo=self.services,
            employees_repo=self.employees,
            orders_repo=self.orders,
            reports_repo=self.reports,
            statistics_repo=self.statistics,
            jwt_secret=JWT_SECRET,
            **extra,
        )
