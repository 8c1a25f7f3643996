from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .auth.service import AuthService
from .auth.tokens import TokenIssuer
from .catalog.mysql_service_repository import MySQLServiceRepository
from .catalog.repository import ServiceRepository
from .catalog.service import CatalogService
from .common.datetime_utils import now_local
from .core.constants import TOKEN_TTL_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .finance.mysql_financial_report_repository import MySQLFinancialReportRepository
from .finance.repository import FinancialReportRepository
from .finance.service import FinancialReportService
from .orders.mysql_order_repository import MySQLOrderRepository
from .orders.repository import OrderRepository
from .orders.service import OrderService
from .statistics.mysql_statistics_repository import MySQLStatisticsRepository
from .statistics.repository import StatisticsRepository
from .statistics.service import StatisticsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import CustomerService


@dataclass(frozen=True)
class Container:
    # None when the container is assembled from in-memory repositories.
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    services_repo: ServiceRepository
    employees_repo: EmployeeRepository
    orders_repo: OrderRepository
    reports_repo: FinancialReportRepository
    statistics_repo: StatisticsRepository

    auth_service: AuthService
    customer_service: CustomerService
    catalog_service: CatalogService
    employee_service: EmployeeService
    order_service: OrderService
    finance_service: FinancialReportService
    statistics_service: StatisticsService


def assemble(
    *,
    conn: Optional[DatabaseConnection],
    users_repo: UserRepository,
    services_repo: ServiceRepository,
    employees_repo: EmployeeRepository,
    orders_repo: OrderRepository,
    reports_repo: FinancialReportRepository,
    statistics_repo: StatisticsRepository,
    jwt_secret: str,
    token_ttl_hours: int = TOKEN_TTL_HOURS,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Wire services on top of the given repositories."""
    tokens = TokenIssuer(jwt_secret, ttl_hours=token_ttl_hours)
    return Container(
        conn=conn,
        users_repo=users_repo,
        services_repo=services_repo,
        employees_repo=employees_repo,
        orders_repo=orders_repo,
        reports_repo=reports_repo,
        statistics_repo=statistics_repo,
        auth_service=AuthService(users_repo, tokens),
        customer_service=CustomerService(users_repo),
        catalog_service=CatalogService(services_repo),
        employee_service=EmployeeService(employees_repo),
        order_service=OrderService(orders_repo, users_repo, services_repo, clock=clock),
        finance_service=FinancialReportService(reports_repo, clock=clock),
        statistics_service=StatisticsService(statistics_repo, clock=clock),
    )


def build_container(*, db_config: dict, jwt_secret: str, token_ttl_hours: int = TOKEN_TTL_HOURS) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        services_repo=MySQLServiceRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        orders_repo=MySQLOrderRepository(conn),
        reports_repo=MySQLFinancialReportRepository(conn),
        statistics_repo=MySQLStatisticsRepository(conn),
        jwt_secret=jwt_secret,
        token_ttl_hours=token_ttl_hours,
    )
