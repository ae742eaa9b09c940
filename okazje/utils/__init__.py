"""
Utility functions for the Okazje+ server.
"""
from okazje.utils.async_helpers import call_threadsafe
from okazje.utils.currency import calculate_discount, convert_to_pln
from okazje.utils.time_helpers import to_datetime, to_iso

__all__ = [
    "call_threadsafe",
    "calculate_discount",
    "convert_to_pln",
    "to_datetime",
    "to_iso",
]
