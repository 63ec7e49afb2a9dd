from .collect import to_list
from .for_each import for_each

__all__ = ("for_each", "to_list")
