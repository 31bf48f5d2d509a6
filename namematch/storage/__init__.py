"""
JSON file persistence for name records and users.
"""

from .records import JsonRecordStore
from .users import JsonUserStore

__all__ = ['JsonRecordStore', 'JsonUserStore']
