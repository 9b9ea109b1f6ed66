import logging
import os

from flask import Flask
from gcp_microservice_utils import setup_cloud_logging, setup_cloud_trace

from blueprints import BlueprintEmployee, BlueprintHealth, BlueprintMetrics
from containers import Container
from repositories.sql import seed_employees

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

DEFAULT_DATABASE_URL = 'sqlite:///employees.db'


class FlaskMicroservice(Flask):
    container: Container


def setup_logging(level: str) -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def create_app() -> FlaskMicroservice:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':
        setup_cloud_logging()
    else:
        setup_logging(os.getenv('LOG_LEVEL', 'INFO'))

    app = FlaskMicroservice(__name__)
    app.container = Container()

    app.container.config.db.url.from_env('DATABASE_URL', default=DEFAULT_DATABASE_URL)
    app.container.config.salary.delay.from_env('SALARY_CALCULATION_DELAY', default=1.0, as_=float)

    if os.getenv('SEED_DATABASE', '1') == '1':
        seed_employees(app.container.employee_repo())

    if os.getenv('ENABLE_CLOUD_TRACE') == '1':
        setup_cloud_trace(app)

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintMetrics)
    app.register_blueprint(BlueprintEmployee)

    return app


if __name__ == '__main__':
    create_app().run()  # pragma: no cover
