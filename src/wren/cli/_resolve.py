"""Locate the wren App a CLI command should act on.

``wren run`` and ``wren routes`` take a target of the form
``module:attribute`` or ``path/to/app.py:attribute``. The file form lets
the bundled examples (which are not importable packages) be served and
inspected directly::

    wren routes examples/hello/app.py
    wren run myservice.api:app
"""

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from wren.app import App

DEFAULT_ATTRIBUTE = "app"


def _load_file(path: Path) -> ModuleType:
    if not path.is_file():
        msg = f"No such app file: {path}"
        raise ModuleNotFoundError(msg)
    module_name = f"_wren_target_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load app file: {path}"
        raise ModuleNotFoundError(msg)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def resolve_app(target: str) -> App:
    """Return the App named by *target*.

    The attribute defaults to ``app``. A zero-argument callable (an app
    factory) is called once and must return an App.

    Raises:
        ModuleNotFoundError: the module or file cannot be found.
        AttributeError: the module has no such attribute.
        TypeError: the attribute is not an App, or the factory failed.
    """
    location, _, attr_name = target.partition(":")
    attr_name = attr_name or DEFAULT_ATTRIBUTE

    if location.endswith(".py"):
        module = _load_file(Path(location))
    else:
        module = importlib.import_module(location)

    obj = getattr(module, attr_name)
    if not isinstance(obj, App) and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"App factory {target!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{target!r} is a {type(obj).__name__}, not a wren.App"
        raise TypeError(msg)
    return obj
