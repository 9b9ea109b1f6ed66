from dependency_injector.wiring import Provide
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from services import EmployeeCounters

from .util import class_route, json_response

blp = Blueprint('Metrics', __name__)


@class_route(blp, '/metrics')
class Metrics(MethodView):
    init_every_request = False

    def get(self, counters: EmployeeCounters = Provide[Container.employee_counters]) -> Response:
        return json_response({counters.METRIC_NAME: counters.snapshot()}, 200)
