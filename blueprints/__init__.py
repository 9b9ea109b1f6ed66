# ruff: noqa: N812

from .employee import blp as BlueprintEmployee
from .health import blp as BlueprintHealth
from .metrics import blp as BlueprintMetrics

__all__ = ['BlueprintEmployee', 'BlueprintHealth', 'BlueprintMetrics']
