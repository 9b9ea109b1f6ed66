import logging
import random
import time

from models import Employee, EmployeeNotFoundError
from repositories import EmployeeRepository

from .counters import EmployeeCounters, counted

logger = logging.getLogger(__name__)

SALARY_MIN = -(2**63)
SALARY_MAX = 2**63 - 1


class EmployeeService:
    def __init__(self, repository: EmployeeRepository, counters: EmployeeCounters, salary_delay: float = 1.0) -> None:
        self.repository = repository
        self.counters = counters
        self.salary_delay = salary_delay

    @counted('get')
    def get_all(self) -> list[Employee]:
        return self.repository.find_all()

    @counted('create')
    def create(self, employee: Employee) -> Employee:
        self.calculate_salary(employee)
        return self.repository.save(employee)

    @counted('get')
    def get_employee(self, employee_id: int) -> Employee | EmployeeNotFoundError:
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            return EmployeeNotFoundError(employee_id)

        return employee

    @counted('create')
    def replace_or_create_employee(self, employee_id: int, employee: Employee) -> Employee:
        found = self.repository.find_by_id(employee_id)

        if found is not None:
            found.name = employee.name
            found.role = employee.role
            self.calculate_salary(found)
            return self.repository.save(found)

        self.calculate_salary(employee)
        return self.repository.save(employee)

    @counted('remove')
    def remove_employee(self, employee_id: int) -> None:
        self.repository.delete_by_id(employee_id)

    def calculate_salary(self, employee: Employee) -> None:
        """Assign a salary to ``employee``.

        Stand-in for a real compensation calculation: blocks the calling thread for
        ``salary_delay`` seconds, then picks a random 64-bit integer. An interrupted
        wait is logged and the salary is left unchanged.
        """
        try:
            time.sleep(self.salary_delay)
        except InterruptedError as err:
            logger.error('Salary calculation interrupted: %s', err)
            return

        employee.salary = random.randint(SALARY_MIN, SALARY_MAX)  # noqa: S311
