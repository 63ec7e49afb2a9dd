from .filter import filter_each
from .map import map_each
from .take import take

__all__ = ("filter_each", "map_each", "take")
