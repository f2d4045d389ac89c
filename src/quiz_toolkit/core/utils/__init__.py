"""
Utils Package

Serialization between QuestionRecord and its wire dictionaries.
"""

from .serialization import serialize_record, deserialize_record

__all__ = [
    "serialize_record",
    "deserialize_record",
]
