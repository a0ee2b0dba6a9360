"""Sérialisation — codec JSON de PageContent."""
from .codec import to_dict, from_dict, dumps, loads

__all__ = ["to_dict", "from_dict", "dumps", "loads"]
