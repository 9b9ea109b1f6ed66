import logging

from models import Employee
from repositories import EmployeeRepository

logger = logging.getLogger(__name__)

SEED_EMPLOYEES = [
    ('Bilbo Baggins', 'burglar'),
    ('Frodo Baggins', 'thief'),
]


def seed_employees(repo: EmployeeRepository) -> None:
    if repo.count() > 0:
        return

    for name, role in SEED_EMPLOYEES:
        employee = repo.save(Employee(name=name, role=role))
        logger.info('Preloading %s', employee)
