"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: FileReader
.. autoclass:: ZipReader
"""

import io
import os
import re
import zipfile


COMMENT_REGEXP = re.compile(r'#.*$')

# UTF-8 BOM: decoded, and as seen when the file is read in a single-byte charset
BOMS = ('\ufeff', '\xef\xbb\xbf')

#: Encoding used before the real charset is known (any byte sequence is readable in it)
DETECTION_ENCODING = 'ISO8859-1'


class BaseReader:
    """
    Common base for :class:`FileReader` and :class:`ZipReader`. In fact, it is a very thin wrapper
    around ``IO``-alike object, to read it line by line and:

    * strip comments (``#`` and everything after it) and whitespace transparently
    * skip empty lines
    * ignore BOM (byte-order mark) at the beginning
    * yield line with its number (1-based)
    * support reading the same source once more, with other encoding::

        for line in reader:
            # find out the encoding
        reader.reopen('ISO8859-2')
        for line in reader:
            # ...read from the first line again

    """
    def __init__(self, obj):
        self.line_no = 0

        self.reset_io(obj)

    def reopen(self, encoding):
        raise NotImplementedError

    def close(self):
        self.io.close()

    def __iter__(self):
        return self

    def __next__(self):
        return self.iter.__next__()

    def readlines(self):
        ln = self.io.readline()
        while ln != '':
            self.line_no += 1
            if self.line_no == 1:
                for bom in BOMS:
                    if ln.startswith(bom):
                        ln = ln[len(bom):]
            yield (self.line_no, COMMENT_REGEXP.sub('', ln).strip())
            ln = self.io.readline()

    def reset_io(self, obj):
        self.io = obj
        self.line_no = 0
        self.iter = filter(lambda l: l[1] != '', self.readlines())


class FileReader(BaseReader):
    """
    Reader implementation for simple filesystem file, or already opened stream (which is convenient
    for tests).

    Binary streams (and text streams with underlying binary buffer, like ``sys.stdin``) are decoded
    with ``encoding``, and decoded again on :meth:`reopen <BaseReader.reopen>`. Pure text streams
    (``io.StringIO``) can't be decoded once more, so they are just rewound.
    """

    def __init__(self, path_or_io, encoding=DETECTION_ENCODING):
        self.path = None
        self.buffer = None

        if isinstance(path_or_io, (str, os.PathLike)):
            self.path = path_or_io
            obj = self._open(path_or_io, encoding)
        elif isinstance(path_or_io, io.TextIOWrapper):
            self.buffer = path_or_io.buffer
            obj = path_or_io
        elif isinstance(path_or_io, (io.BufferedIOBase, io.RawIOBase)):
            self.buffer = path_or_io
            if isinstance(path_or_io, io.RawIOBase):
                self.buffer = io.BufferedReader(path_or_io)
            obj = self._wrap(self.buffer, encoding)
        elif isinstance(path_or_io, io.TextIOBase):
            obj = path_or_io
        else:
            raise ValueError(f"Expected path or IO, got {type(path_or_io)}")

        super().__init__(obj)

    def reopen(self, encoding):
        if self.path is not None:
            self.io.close()
            self.reset_io(self._open(self.path, encoding))
        elif self.buffer is not None:
            # The old wrapper would close the buffer when garbage-collected
            self.io.detach()
            self.buffer.seek(0)
            self.reset_io(self._wrap(self.buffer, encoding))
        else:
            # Already decoded stream, can only be rewound
            self.io.seek(0)
            self.reset_io(self.io)

    def _open(self, path, encoding):  # pylint: disable=no-self-use
        # errors='surrogateescape', because dictionaries happen to have bytes invalid in their
        # declared charset
        return open(path, 'r', encoding=encoding, errors='surrogateescape')

    def _wrap(self, buffer, encoding):  # pylint: disable=no-self-use
        return io.TextIOWrapper(buffer, encoding=encoding, errors='surrogateescape')


class ZipReader(BaseReader):
    """
    Reader implementation for file inside zip archive.
    """

    def __init__(self, archive: zipfile.ZipFile, name: str, encoding=DETECTION_ENCODING):
        self.archive = archive
        self.name = name
        super().__init__(self._open(encoding))

    def reopen(self, encoding):
        self.io.close()
        self.reset_io(self._open(encoding))

    def _open(self, encoding):
        return io.TextIOWrapper(self.archive.open(self.name), encoding=encoding, errors='surrogateescape')
