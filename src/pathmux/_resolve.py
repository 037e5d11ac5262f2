"""Handler import resolution — ``"module:attribute"`` strings to handlers.

Used when a route table names its handlers by import path instead of
supplying them directly.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathmux._types import Handler


def resolve_handler(import_string: str) -> Handler:
    """Resolve an import string to a handler callable.

    Accepts ``"module:attribute"``; the attribute may be dotted
    (``"myapp.views:Users.show"``).

    Raises:
        ValueError: If the string is not in ``module:attribute`` form.
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not callable.
    """
    module_path, sep, attr_path = import_string.partition(":")
    if not sep or not module_path or not attr_path:
        msg = f"handler reference {import_string!r} must look like 'module:attribute'"
        raise ValueError(msg)

    obj: object = importlib.import_module(module_path)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not callable(obj):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, which is not callable"
        raise TypeError(msg)
    return obj
