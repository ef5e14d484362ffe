"""
Consumers of word forms, to be passed to
:meth:`Dictionary.process_all_forms <wordforms.myspell.dictionary.Dictionary.process_all_forms>`.

Any callable receiving list of forms (base form first) is a consumer; these are the ready-made ones.

.. autoclass:: FullDictionaryWriter
.. autoclass:: FormsTrieBuilder
    :members:
"""

from typing import Iterable, Iterator, List, TextIO

from wordforms.myspell.algo.trie import Trie
from wordforms.myspell.errors import ConsumerError


class FullDictionaryWriter:
    """
    Writes all forms of each word as one line, comma-separated::

        krasc,krslem

    Args:
        out: Text stream to write to
        ignored: Base forms of words that should not be written
    """

    def __init__(self, out: TextIO, ignored: Iterable[str] = ()):
        self.out = out
        self.ignored = set(ignored)

    def __call__(self, forms: List[str]) -> None:
        if not forms or forms[0].strip() in self.ignored:
            return

        try:
            self.out.write(','.join(form.strip() for form in forms) + '\n')
        except OSError as e:
            raise ConsumerError(f"Cannot write forms of {forms[0]!r}: {e}") from e


class FormsTrieBuilder:
    """
    Stores all the forms in :class:`Trie <wordforms.myspell.algo.trie.Trie>`, each with its base form
    as a payload. Usage::

        builder = FormsTrieBuilder()
        dictionary.process_all_forms(builder)

        'krslem' in builder     # => True
        builder.bases('krslem') # => ['krasc']

    Args:
        only_base_forms: Store only base forms of words
        transducer: Store each form as ``<form>*<base form>``
    """

    TRANSDUCER_SEPARATOR = '*'

    def __init__(self, only_base_forms: bool = False, transducer: bool = False):
        self.only_base_forms = only_base_forms
        self.transducer = transducer
        self.trie = Trie()

    def __call__(self, forms: List[str]) -> None:
        base = forms[0]
        if self.only_base_forms:
            self.trie.put(base, base)
            return

        for form in forms:
            if self.transducer:
                form += self.TRANSDUCER_SEPARATOR + base
            self.trie.put(form, base)

    def __contains__(self, text: str) -> bool:
        return bool(self.trie.get(text))

    def bases(self, text: str) -> List[str]:
        """
        Base forms of the words ``text`` was produced from.
        """
        return self.trie.get(text)

    def lookup(self, text: str) -> Iterator[str]:
        """
        Base forms of all stored strings that are prefixes of ``text`` (shortest first).
        """
        return self.trie.lookup(text)

    def words(self) -> Iterator[str]:
        """
        All stored strings in lexicographic order.
        """
        for text, _ in self.trie.items():
            yield text
