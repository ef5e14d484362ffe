from .dictionary import Dictionary
from .errors import FormatError, ConsumerError, ProcessingError

__all__ = [
    "Dictionary",
    "FormatError",
    "ConsumerError",
    "ProcessingError"
]
