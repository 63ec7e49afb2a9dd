from .zip import zip_pair, zip_with_index

__all__ = ("zip_pair", "zip_with_index")
