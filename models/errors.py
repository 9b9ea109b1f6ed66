class EmployeeNotFoundError(Exception):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f'No Employee found with ID: {employee_id}')
        self.employee_id = employee_id

    @property
    def message(self) -> str:
        return str(self)
