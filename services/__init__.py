from .counters import EmployeeCounters, counted
from .employee import EmployeeService

__all__ = ['EmployeeCounters', 'EmployeeService', 'counted']
