from dataclasses import dataclass, field
from typing import Any

import marshmallow
import marshmallow_dataclass
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from models import Employee, EmployeeNotFoundError
from services import EmployeeService

from .util import class_route, empty_response, error_response, json_response, text_response, validation_error_response

blp = Blueprint('Employees', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        'id': employee.id,
        'name': employee.name,
        'role': employee.role,
        'salary': employee.salary,
    }


class BaseSchema(marshmallow.Schema):
    class Meta:
        unknown = marshmallow.EXCLUDE


# Employee validation class, id and salary are never taken from the caller
@dataclass
class EmployeeBody:
    name: str = field(metadata={'validate': marshmallow.validate.Length(min=1)})
    role: str = field(metadata={'validate': marshmallow.validate.Length(min=1)})


def parse_employee_body() -> Employee | Response:
    employee_schema = marshmallow_dataclass.class_schema(EmployeeBody, base_schema=BaseSchema)()
    req_json = request.get_json(silent=True)
    if not isinstance(req_json, dict):
        return error_response(JSON_VALIDATION_ERROR, 400)

    try:
        data: EmployeeBody = employee_schema.load(req_json)
    except marshmallow.ValidationError as err:
        return validation_error_response(err)

    return Employee(name=data.name, role=data.role)


@class_route(blp, '/employees')
class Employees(MethodView):
    init_every_request = False

    def get(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        employees = employee_service.get_all()
        return json_response([employee_to_dict(e) for e in employees], 200)

    def post(self, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        candidate = parse_employee_body()
        if isinstance(candidate, Response):
            return candidate

        employee = employee_service.create(candidate)
        return json_response(employee_to_dict(employee), 200)


@class_route(blp, '/employees/<int(signed=True):employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    def get(self, employee_id: int, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        result = employee_service.get_employee(employee_id)

        if isinstance(result, EmployeeNotFoundError):
            return text_response(result.message, 404)

        return json_response(employee_to_dict(result), 200)

    def put(self, employee_id: int, employee_service: EmployeeService = Provide[Container.employee_service]) -> Response:
        candidate = parse_employee_body()
        if isinstance(candidate, Response):
            return candidate

        employee = employee_service.replace_or_create_employee(employee_id, candidate)
        return json_response(employee_to_dict(employee), 200)

    def delete(
        self,
        employee_id: int,
        employee_service: EmployeeService = Provide[Container.employee_service],
    ) -> Response:
        employee_service.remove_employee(employee_id)
        return empty_response(200)
