"""Dataset loading for the lab test catalog."""

from .loader import load_catalog, parse_records

__all__ = ["load_catalog", "parse_records"]
