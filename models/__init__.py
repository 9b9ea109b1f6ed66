from .employee import Employee
from .errors import EmployeeNotFoundError

__all__ = ['Employee', 'EmployeeNotFoundError']
