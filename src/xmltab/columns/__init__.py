from . import types
from . import models
from . import config
from . import resolve

__all__ = [
    "types",
    "models",
    "config",
    "resolve",
]
