import dacite
from sqlalchemy import BigInteger, Engine, String, delete, func, select
from sqlalchemy.orm import Mapped, mapped_column, sessionmaker

from models import Employee
from repositories import EmployeeRepository

from .base import Base

ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class EmployeeRow(Base):
    __tablename__ = 'employees'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


# Ids outside the INTEGER column range can never match a row
def is_storable_id(employee_id: int | None) -> bool:
    return employee_id is not None and ID_MIN <= employee_id <= ID_MAX


def row_to_employee(row: EmployeeRow) -> Employee:
    return dacite.from_dict(
        data_class=Employee,
        data={
            'id': row.id,
            'name': row.name,
            'role': row.role,
            'salary': row.salary,
        },
    )


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, engine: Engine) -> None:
        self.session_factory = sessionmaker(engine, expire_on_commit=False)

    def find_all(self) -> list[Employee]:
        with self.session_factory() as session:
            rows = session.scalars(select(EmployeeRow).order_by(EmployeeRow.id))
            return [row_to_employee(row) for row in rows]

    def find_by_id(self, employee_id: int) -> Employee | None:
        with self.session_factory() as session:
            row = session.get(EmployeeRow, employee_id) if is_storable_id(employee_id) else None
            return row_to_employee(row) if row is not None else None

    def save(self, employee: Employee) -> Employee:
        with self.session_factory.begin() as session:
            row = session.get(EmployeeRow, employee.id) if is_storable_id(employee.id) else None

            # Unknown ids are treated like unsaved records, the store assigns a fresh one
            if row is None:
                row = EmployeeRow()
                session.add(row)

            row.name = employee.name
            row.role = employee.role
            row.salary = employee.salary
            session.flush()

            return row_to_employee(row)

    def delete_by_id(self, employee_id: int) -> None:
        if not is_storable_id(employee_id):
            return

        with self.session_factory.begin() as session:
            session.execute(delete(EmployeeRow).where(EmployeeRow.id == employee_id))

    def count_by_name(self, name: str) -> int:
        with self.session_factory() as session:
            stmt = select(func.count()).select_from(EmployeeRow).where(EmployeeRow.name == name)
            return session.scalar(stmt) or 0

    def count(self) -> int:
        with self.session_factory() as session:
            return session.scalar(select(func.count()).select_from(EmployeeRow)) or 0
