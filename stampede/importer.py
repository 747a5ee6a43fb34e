"""importer.py"""

import importlib
from types import ModuleType
from typing import Any, Callable


def resolve_callable(path: str) -> Callable[..., Any]:
    """
    Resolve a dotted path to a Python callable.
    Example: 'mypackage.mymodule.myfunction' or 'mypackage.mymodule:myfunction'

    Raises:
        ImportError if the module or function does not exist.
        ValueError if the resolved attribute is not callable.
    """
    if ":" in path:
        module_path, function_name = path.split(":", 1)
    else:
        *module_parts, function_name = path.split(".")
        module_path = ".".join(module_parts)

    if not module_path:
        raise ValueError(f"Invalid callable path: '{path}'")

    module: ModuleType = importlib.import_module(module_path)
    try:
        function: Any = getattr(module, function_name)
    except AttributeError as error:
        raise ImportError(
            f"Module '{module_path}' has no attribute '{function_name}'"
        ) from error

    if not callable(function):
        raise ValueError(f"Resolved attribute '{function_name}' is not callable.")

    return function
