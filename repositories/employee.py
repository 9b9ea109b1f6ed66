from models import Employee


class EmployeeRepository:
    def find_all(self) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover

    def find_by_id(self, employee_id: int) -> Employee | None:
        raise NotImplementedError  # pragma: no cover

    def save(self, employee: Employee) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def delete_by_id(self, employee_id: int) -> None:
        raise NotImplementedError  # pragma: no cover

    def count_by_name(self, name: str) -> int:
        raise NotImplementedError  # pragma: no cover

    def count(self) -> int:
        raise NotImplementedError  # pragma: no cover
