from seam.model.element import Attribute, Element, ValueKind
from seam.model.tree import Edit, SourceTree

__all__ = [
    "Attribute",
    "Edit",
    "Element",
    "SourceTree",
    "ValueKind",
]
