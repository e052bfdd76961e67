"""
Processors module for loading stored sentence and card records.
"""

from .record_loader import RecordLoader, parse_success

__all__ = [
    'RecordLoader',
    'parse_success'
]
