from .employee import EmployeeRepository

__all__ = ['EmployeeRepository']
