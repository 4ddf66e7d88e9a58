"""
Moderare resources.

This package provides the resource variants the scope tree validates: Item for
a single data value and Collection for an ordered sequence of values.
"""

from moderare.resource.base import ResourceBase
from moderare.resource.collection import Collection
from moderare.resource.item import Item

__all__ = ["ResourceBase", "Item", "Collection"]
