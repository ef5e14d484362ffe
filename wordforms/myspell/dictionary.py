from __future__ import annotations

import glob
import logging
import os.path
import zipfile

from contextlib import closing
from typing import IO, Iterable, Iterator, List, Optional, Tuple, Union

from wordforms.myspell import data, readers
from wordforms.myspell.readers.file_reader import FileReader, ZipReader
from wordforms.myspell.algo import process
from wordforms.myspell.consumers import FullDictionaryWriter


logger = logging.getLogger(__name__)


class Dictionary:
    """
    The main and only interface to ``wordforms.myspell`` as a library.

    Usage::

        from wordforms.myspell import Dictionary

        # from folder where pl_PL.aff and pl_PL.dic are present
        dictionary = Dictionary.from_files('/path/to/dictionary/pl_PL')
        # or, from OpenOffice/Firefox dictionary extension
        dictionary = Dictionary.from_zip('/path/to/dictionary/pl_PL.oxt')
        # or, from system folders (on Linux)
        dictionary = Dictionary.from_system('pl_PL')

        for forms in dictionary.all_forms():
            print(forms)
        # ['krasc', 'krslem']
        # ...

    Forms can be passed to any consumer, with control over errors::

        report = dictionary.process_all_forms(consumer, break_on_exception=False)

    **Dictionary creation**

    .. automethod:: from_files
    .. automethod:: from_folder
    .. automethod:: from_zip
    .. automethod:: from_system

    **Dictionary usage**

    .. automethod:: forms
    .. automethod:: all_forms
    .. automethod:: process_all_forms
    .. automethod:: write_full_dictionary

    **Data objects**

    .. autoattribute:: aff
    .. autoattribute:: dic
    """

    #: Contents of ``*.aff``
    aff: data.aff.Aff
    #: Contents of ``*.dic``
    dic: data.dic.Dic

    #: Instance of ``Processor``, see :mod:`algo.process <wordforms.myspell.algo.process>`.
    processor: process.Processor

    PATHES = [
        # lib
        "/usr/share/myspell",
        "/usr/share/myspell/dicts",
        "/usr/share/hunspell",
        "/Library/Spelling",

        # OpenOffice
        "/opt/openoffice.org/basis3.0/share/dict/ooo",
        "/usr/lib/openoffice.org/basis3.0/share/dict/ooo",
        "/opt/openoffice.org2.4/share/dict/ooo",
        "/usr/lib/openoffice.org2.4/share/dict/ooo",
        "/opt/openoffice.org2.0/share/dict/ooo",
        "/usr/lib/openoffice.org2.0/share/dict/ooo"
    ]

    @classmethod
    def from_files(cls, path: Union[str, os.PathLike]) -> Dictionary:
        """
        Read dictionary from pair of files ``/some/path/some_name.aff`` and ``/some/path/some_name.dic``.

        Args:
            path: Should be just ``/some/path/some_name`` (string or ``pathlib.Path``).
        """

        path = os.fspath(path)
        logger.info("Loading MySpell dictionary from path : %s", path)

        with closing(FileReader(path + '.aff')) as source:
            aff, context = readers.read_aff(source)
        with closing(FileReader(path + '.dic', encoding=context.encoding)) as source:
            dic = readers.read_dic(source, context=context)

        logger.info("MySpell dictionary loaded.")
        return cls(aff, dic)

    @classmethod
    def from_folder(cls, folder: Union[str, os.PathLike], name: str) -> Dictionary:
        """
        Read dictionary ``<name>.aff``/``<name>.dic`` from the folder.
        """

        return cls.from_files(os.path.join(folder, name))

    # .oxt, .xpi
    @classmethod
    def from_zip(cls, path: str) -> Dictionary:
        """
        Read dictionary from zip-archive containing ``*.aff`` and ``*.dic`` files. Note that OpenOffice
        dictionary extensions (``*.oxt``) and Firefox/Thunderbird dictionary extensions (``*.xpi``)
        are in fact such archives, so ``Dictionary`` can be read from them without unpacking.

        If the archive contains several dictionaries, the first ``*.aff`` having ``*.dic`` with the same
        name is read.

        Args:
            path: Path to zip-file/extension.
        """

        logger.info("Loading MySpell dictionary from archive : %s", path)

        with zipfile.ZipFile(path) as archive:
            aff_name, dic_name = find_pair(archive.namelist(), path)

            with closing(ZipReader(archive, aff_name)) as source:
                aff, context = readers.read_aff(source)
            with closing(ZipReader(archive, dic_name, encoding=context.encoding)) as source:
                dic = readers.read_dic(source, context=context)

        return cls(aff, dic)

    @classmethod
    def from_system(cls, name: str) -> Dictionary:
        """
        Tries to find ``<name>.aff`` and ``<name>.dic`` on system paths known to store MySpell dictionaries.
        Probably works only on Linux.

        Args:
            name: Language/dictionary name, like ``pl_PL``
        """

        for folder in cls.PATHES:
            pathes = glob.glob(f'{folder}/{name}.aff')
            if pathes:
                return cls.from_files(pathes[0][:-len('.aff')])

        raise LookupError(f'{name}.aff not found (search pathes are {cls.PATHES!r})')

    def __init__(self, aff, dic):
        self.aff = aff
        self.dic = dic

        self.processor = process.Processor(self.aff, self.dic)

    @property
    def charset(self) -> str:
        """
        Charset of dictionary files, as declared in ``*.aff``.
        """
        return self.aff.SET

    def forms(self, word: data.dic.WordPattern) -> List[str]:
        """
        All forms of one word, base form first::

            >>> dictionary.forms(WordPattern('krasc', 'A'))
            ['krasc', 'krslem']

        Raises:
            FormatError: if the word refers to unknown rule set
        """

        return word.expand(self.aff.rule_sets)

    def all_forms(self) -> Iterator[List[str]]:
        """
        Lazily yields forms of all words of the dictionary, in the order of ``*.dic``. Errors are not
        caught: see :meth:`process_all_forms` for that.
        """

        for word in self.dic.words:
            yield self.forms(word)

    def process_all_forms(self, consumer: process.Consumer, *,
                          break_on_exception: bool = True,
                          workers: Optional[int] = None) -> process.ProcessingReport:
        """
        Passes forms of each word to ``consumer``. See :meth:`Processor.__call__
        <wordforms.myspell.algo.process.Processor.__call__>` for arguments.
        """

        return self.processor(consumer, break_on_exception=break_on_exception, workers=workers)

    def write_full_dictionary(self, target: Union[str, os.PathLike, IO[str]], *,
                              ignored: Iterable[str] = ()) -> None:
        """
        Writes all forms of all words, one word per line (see
        :class:`FullDictionaryWriter <wordforms.myspell.consumers.FullDictionaryWriter>`). Stops on the
        first error.

        Args:
            target: Path of the file to write (in the dictionary's charset), or text stream
            ignored: Base forms of words to skip
        """

        if not isinstance(target, (str, os.PathLike)):
            self.process_all_forms(FullDictionaryWriter(target, ignored))
            return

        logger.info("Writing full dictionary to file : %s", target)
        logger.info("  output charset name : %s", self.charset)
        with open(target, 'w', encoding=self.charset, errors='surrogateescape') as out:
            self.process_all_forms(FullDictionaryWriter(out, ignored))
        logger.info("Full dictionary generated.")

    def __repr__(self):
        return f"Dictionary({self.aff!r}, {self.dic!r})"


def find_pair(names: List[str], path) -> Tuple[str, str]:
    """
    First ``<name>.aff`` from the list that has ``<name>.dic`` next to it.
    """

    for name in names:
        if name.endswith('.aff'):
            dic_name = name[:-len('.aff')] + '.dic'
            if dic_name in names:
                return (name, dic_name)

    raise LookupError(f'No *.aff/*.dic pair in {path}')
