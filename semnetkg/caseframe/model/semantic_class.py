"""
Semantic classes assigned by the standard case frames.
"""
from enum import Enum

class SemanticClass(str, Enum):
    """
    Default semantic types of nodes built from the standard case frames.

    Custom frames may use any other label; these are the ones the standard
    catalog relies on.
    """
    PROPOSITION = "Proposition"
    ACT = "Act"
    CONTROL_ACTION = "ControlAction"

    @classmethod
    def get_all_classes(cls) -> list[str]:
        """Return a list of all standard semantic class names."""
        return [sc.value for sc in cls]

    @classmethod
    def is_valid(cls, semantic_class: str) -> bool:
        """Check if a semantic class name is one of the standard ones."""
        return semantic_class in [sc.value for sc in cls]
