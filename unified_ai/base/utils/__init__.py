"""Small shared helpers: safe JSON navigation, timestamps, memo cell."""

from .mapping import dig, dig_list, dig_str
from .resolved_once import ResolvedOnce
from .timestamps import parse_epoch, parse_iso8601

__all__ = ["dig", "dig_list", "dig_str", "ResolvedOnce", "parse_epoch", "parse_iso8601"]
