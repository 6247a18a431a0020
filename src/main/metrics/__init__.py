"""
Registry of structural statement metrics.

Every submodule of this package is imported on package import, so any
function decorated with ``@metric`` in a submodule is registered under its
display name and picked up by the metrics collector.
"""

import importlib
import pathlib
import pkgutil
from typing import Callable, Dict

from src.main.statement import Statement

StatementMetric = Callable[[Statement], int]

registry: Dict[str, StatementMetric] = {}


def metric(name: str):
    def wrapper(fn: StatementMetric):
        if name in registry and registry[name] is not fn:
            raise ValueError(f"Metric {name!r} is already registered.")
        registry[name] = fn
        return fn

    return wrapper


_pkg_path = pathlib.Path(__file__).parent
for m in pkgutil.iter_modules([str(_pkg_path)]):
    importlib.import_module(f"{__name__}.{m.name}")
