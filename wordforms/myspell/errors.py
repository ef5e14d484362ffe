"""
Exceptions raised while reading MySpell dictionaries and processing their word forms.

.. autoexception:: FormatError
.. autoexception:: ConsumerError
.. autoexception:: ProcessingError

Underlying I/O problems (missing file, unknown charset name) are not wrapped: they surface as the
``OSError``/``LookupError`` Python raises for them.
"""

from typing import Optional


class FormatError(ValueError):
    """
    Malformed ``*.aff``/``*.dic`` content: wrong number of tokens, unparseable counts, symbol mismatch,
    missing ``SET`` directive, or a word referring to a rule set that does not exist.

    When the offending line is known, it is available in :attr:`line_no` (1-based) and :attr:`line`.
    """

    def __init__(self, message: str, *, line_no: Optional[int] = None, line: Optional[str] = None):
        self.reason = message
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f'Syntax error at line {line_no} : "{line}" - {message}'
        super().__init__(message)


class ConsumerError(Exception):
    """
    Failure of a word forms consumer (see :mod:`consumers <wordforms.myspell.consumers>`).
    """


class ProcessingError(Exception):
    """
    Failure to process one dictionary word. The original :class:`FormatError` or :class:`ConsumerError`
    is available as ``__cause__``.
    """

    def __init__(self, word, cause: Exception):
        self.word = word
        super().__init__(f"Cannot process word {word!r}: {cause}")
        self.__cause__ = cause
