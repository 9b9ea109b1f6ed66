from dependency_injector import containers, providers

from repositories.sql import SqlEmployeeRepository, create_db_engine
from services import EmployeeCounters, EmployeeService


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration()

    db_engine = providers.Singleton(create_db_engine, url=config.db.url)

    employee_repo = providers.Singleton(SqlEmployeeRepository, engine=db_engine)

    employee_counters = providers.Singleton(EmployeeCounters)

    employee_service = providers.Singleton(
        EmployeeService,
        repository=employee_repo,
        counters=employee_counters,
        salary_delay=config.salary.delay,
    )
