import threading
from collections.abc import Callable
from typing import Any, TypeVar, cast

from tightwrap import wraps

F = TypeVar('F', bound=Callable[..., Any])


class EmployeeCounters:
    """Monotonic per-action operation counters for the employee service.

    Increments are guarded by a lock so concurrent requests never lose an update.
    ``snapshot`` gives a reporting backend read access to the current values.
    """

    METRIC_NAME = 'employee_manager'
    ACTIONS = ('create', 'get', 'remove')

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values = dict.fromkeys(self.ACTIONS, 0)

    def increment(self, action: str) -> None:
        with self._lock:
            if action not in self._values:
                raise KeyError(f'Unknown counter action: {action}')
            self._values[action] += 1

    def count(self, action: str) -> int:
        with self._lock:
            return self._values[action]

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._values)


def counted(action: str) -> Callable[[F], F]:
    def decorator(f: F) -> F:
        @wraps(f)
        def decorated_function(self, *args, **kwargs):  # type: ignore[no-untyped-def] # noqa: ANN001, ANN002, ANN003, ANN202
            self.counters.increment(action)
            return f(self, *args, **kwargs)

        return cast(F, decorated_function)

    return decorator
