import json
from collections.abc import Callable
from typing import Any, cast

import marshmallow
from flask import Blueprint, Response
from flask.views import MethodView


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def text_response(text: str, status: int) -> Response:
    return Response(text, status=status, mimetype='text/plain')


def empty_response(status: int) -> Response:
    return Response(status=status)


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    field, messages = next(iter(cast(dict[str, list[str]], err.messages).items()))
    return error_response(f'Invalid value for {field}: {" ".join(messages)}', 400)
