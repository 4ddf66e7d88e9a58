"""
Moderare - include-aware validation of resource trees

Moderare resolves dot-delimited include requests against a hierarchy of
resources, runs a validator on each resource node, descends only into the
includes that were requested and aggregates failures up to the root.
"""

from importlib.metadata import version

from moderare.core import MessageBag, ParamBag
from moderare.engine import Engine, EngineSettings
from moderare.resource import Collection, Item
from moderare.scope import Scope
from moderare.validation import Validator

__version__ = version("moderare")

__all__ = [
    "__version__",
    "Engine",
    "EngineSettings",
    "Scope",
    "Item",
    "Collection",
    "Validator",
    "MessageBag",
    "ParamBag",
]
