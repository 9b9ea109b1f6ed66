from typing import cast

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from models import Employee
from repositories.sql import SqlEmployeeRepository, create_db_engine, seed_employees
from repositories.sql.employee import ID_MAX, ID_MIN


class TestEmployee(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.engine = create_db_engine('sqlite://')
        self.repo = SqlEmployeeRepository(self.engine)

    def tearDown(self) -> None:
        self.engine.dispose()

    def gen_random_employee(self) -> Employee:
        return Employee(name=self.faker.name(), role=self.faker.job())

    def test_save_assigns_id(self) -> None:
        employee = self.gen_random_employee()
        employee.salary = cast(int, self.faker.pyint())

        saved = self.repo.save(employee)

        self.assertIsNotNone(saved.id)
        self.assertEqual(saved, employee)
        self.assertEqual(saved.salary, employee.salary)

    def test_find_by_id(self) -> None:
        saved = self.repo.save(self.gen_random_employee())

        found = self.repo.find_by_id(cast(int, saved.id))

        self.assertEqual(found, saved)
        self.assertEqual(cast(Employee, found).id, saved.id)

    def test_find_by_id_missing(self) -> None:
        self.assertIsNone(self.repo.find_by_id(999))

    def test_find_all(self) -> None:
        employees = [self.repo.save(self.gen_random_employee()) for _ in range(3)]

        self.assertEqual(self.repo.find_all(), employees)

    def test_save_updates_existing(self) -> None:
        saved = self.repo.save(self.gen_random_employee())
        saved.name = self.faker.name()
        saved.salary = 42

        updated = self.repo.save(saved)

        self.assertEqual(updated.id, saved.id)
        self.assertEqual(self.repo.find_by_id(cast(int, saved.id)), saved)
        self.assertEqual(self.repo.count(), 1)

    def test_save_unknown_id_inserts(self) -> None:
        employee = self.gen_random_employee()
        employee.id = 500

        saved = self.repo.save(employee)

        self.assertIsNotNone(saved.id)
        self.assertEqual(self.repo.count(), 1)

    @parametrize(
        'existing',
        [
            (True,),
            (False,),
        ],
    )
    def test_delete_by_id(self, existing: bool) -> None:  # noqa: FBT001
        saved = self.repo.save(self.gen_random_employee())
        employee_id = cast(int, saved.id) if existing else cast(int, saved.id) + 1

        self.repo.delete_by_id(employee_id)

        self.assertEqual(self.repo.count(), 0 if existing else 1)

    def test_count_by_name(self) -> None:
        name = self.faker.name()
        self.repo.save(Employee(name=name, role=self.faker.job()))
        self.repo.save(Employee(name=name, role=self.faker.job()))
        self.repo.save(Employee(name=f'{name} Jr.', role=self.faker.job()))

        self.assertEqual(self.repo.count_by_name(name), 2)
        self.assertEqual(self.repo.count_by_name('Nobody'), 0)

    def test_seed(self) -> None:
        seed_employees(self.repo)

        self.assertEqual(self.repo.count(), 2)
        self.assertEqual(self.repo.count_by_name('Bilbo Baggins'), 1)

    def test_seed_skips_populated_store(self) -> None:
        self.repo.save(self.gen_random_employee())

        seed_employees(self.repo)

        self.assertEqual(self.repo.count(), 1)

    @parametrize(
        'employee_id',
        [
            (ID_MAX + 1,),
            (ID_MIN - 1,),
        ],
    )
    def test_id_outside_column_range_is_absent(self, employee_id: int) -> None:
        self.repo.save(self.gen_random_employee())

        self.assertIsNone(self.repo.find_by_id(employee_id))
        self.repo.delete_by_id(employee_id)
        self.assertEqual(self.repo.count(), 1)

    def test_save_id_outside_column_range_inserts(self) -> None:
        employee = self.gen_random_employee()
        employee.id = ID_MAX + 1

        saved = self.repo.save(employee)

        self.assertNotEqual(saved.id, employee.id)
        self.assertEqual(self.repo.find_by_id(cast(int, saved.id)), employee)

    def test_negative_id_is_absent(self) -> None:
        self.repo.save(self.gen_random_employee())

        self.assertIsNone(self.repo.find_by_id(-1))
        self.repo.delete_by_id(-1)
        self.assertEqual(self.repo.count(), 1)
