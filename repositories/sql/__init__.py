from .base import Base, create_db_engine
from .employee import SqlEmployeeRepository
from .seed import seed_employees

__all__ = ['Base', 'create_db_engine', 'SqlEmployeeRepository', 'seed_employees']
