"""
The module represents data from MySpell's ``*.dic`` file.

This text file has the following format:

.. code-block:: text

    124 # first line: number of entries (informational)

    # Each entry has form:
    krasc/AB
    # ...or, for words without any forms:
    i

See :class:`WordPattern` for explanation about fields.

The meaning of rule set symbols, as well as file encoding, are defined by
:class:`Aff <wordforms.myspell.data.aff.Aff>`.

``Dic`` is read by :meth:`read_dic <wordforms.myspell.readers.dic.read_dic>`.

``Dic``: list of entries
------------------------

.. autoclass:: Dic

``WordPattern``: dictionary entry
---------------------------------

.. autoclass:: WordPattern
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import List, Mapping

from wordforms.myspell.data.aff import AffixRuleSet
from wordforms.myspell.algo import expand


@dataclass(frozen=True)
class WordPattern:
    """
    One word of a .dic file, like

    .. code-block:: text

        krasc/AB

    Where ``krasc`` is the base form, and ``AB`` are symbols of rule sets applicable to it (order
    doesn't matter). Symbols can be absent (the word doesn't inflect).

    .. automethod:: expand
    """

    #: Word's base (dictionary) form
    base_form: str
    #: Symbols of rule sets, one character per set
    rule_symbols: str = ''

    @classmethod
    def parse(cls, line: str) -> 'WordPattern':
        """
        Splits ``line`` at the first ``/``. A line starting with ``/`` is a word starting with ``/``,
        not an empty word with symbols.
        """

        pos = line.find('/')
        if pos > 0:
            return cls(line[:pos], line[pos + 1:])
        return cls(line)

    def expand(self, rule_table: Mapping[str, AffixRuleSet]) -> List[str]:
        """
        All forms of the word: base form first, then all the distinct derived forms in
        lexicographic order. See :mod:`algo.expand <wordforms.myspell.algo.expand>` for the algorithm.

        Raises:
            FormatError: if some of the symbols is absent in ``rule_table``
        """

        return expand.expand(self.base_form, self.rule_symbols, rule_table)

    def __str__(self):
        if self.rule_symbols:
            return f"{self.base_form}/{self.rule_symbols}"
        return self.base_form


@dataclass
class Dic:
    """
    Represents list of words from ``*.dic`` file, in the order of the file. Each word is stored as an
    instance of :class:`WordPattern`.

    There could be several entries with the same base form but different symbols, so :meth:`homonyms`
    returns lists.

    .. automethod:: homonyms
    .. automethod:: append
    """

    #: List of all words from ``*.dic`` file
    words: List[WordPattern]
    #: Word count declared in the first line (not checked against the real number of words)
    declared_count: int = 0

    def __post_init__(self):
        self.index = defaultdict(list)
        for word in self.words:
            self.index[word.base_form].append(word)

    def homonyms(self, base_form: str) -> List[WordPattern]:
        """
        Returns all :class:`WordPattern` instances with the same base form.
        """
        return self.index.get(base_form, [])

    def append(self, word: WordPattern):
        """
        Adds a word to the dictionary (used on reading).
        """

        self.words.append(word)
        self.index[word.base_form].append(word)

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __repr__(self):
        return f"Dic({len(self.words)} words)"
