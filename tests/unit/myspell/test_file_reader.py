import io
import zipfile

import pytest

from wordforms.myspell.readers import FileReader, ZipReader


def test_lines():
    reader = FileReader(io.StringIO("line\n\n  # empty, too\ncontent # comment\n"))

    assert list(reader) == [(1, 'line'), (4, 'content')]


def test_bom():
    reader = FileReader(io.StringIO("\ufeffSET UTF-8\nkot\n"))
    assert list(reader) == [(1, 'SET UTF-8'), (2, 'kot')]

    reader = FileReader(io.StringIO("\xef\xbb\xbfSET UTF-8\n"))
    assert list(reader) == [(1, 'SET UTF-8')]


def test_reopen_stream():
    reader = FileReader(io.StringIO("\ufeffSET UTF-8\nkot\n"))
    assert next(reader) == (1, 'SET UTF-8')

    reader.reopen('UTF-8')
    assert list(reader) == [(1, 'SET UTF-8'), (2, 'kot')]


def test_encodings(tmp_path):
    path = tmp_path / 'test.aff'
    path.write_bytes('SET ISO8859-2\nżółw\n'.encode('ISO8859-2'))

    reader = FileReader(str(path))
    assert next(reader) == (1, 'SET ISO8859-2')
    assert next(reader) != (2, 'żółw')

    reader.reopen('ISO8859-2')
    assert list(reader) == [(1, 'SET ISO8859-2'), (2, 'żółw')]
    reader.close()


def test_invalid_source():
    with pytest.raises(ValueError):
        FileReader(123)


def test_zip(tmp_path):
    path = tmp_path / 'test.zip'
    with zipfile.ZipFile(path, 'w') as archive:
        archive.writestr('dict/test.aff', 'SET ISO8859-2\nżółw # turtle\n'.encode('ISO8859-2'))

    with zipfile.ZipFile(path) as archive:
        reader = ZipReader(archive, 'dict/test.aff')
        assert next(reader) == (1, 'SET ISO8859-2')

        reader.reopen('ISO8859-2')
        assert list(reader) == [(1, 'SET ISO8859-2'), (2, 'żółw')]
        reader.close()


def test_reopen_binary_stream():
    reader = FileReader(io.BytesIO('SET ISO8859-2\nżółw\n'.encode('ISO8859-2')))
    assert next(reader) == (1, 'SET ISO8859-2')

    reader.reopen('ISO8859-2')
    assert list(reader) == [(1, 'SET ISO8859-2'), (2, 'żółw')]
    reader.close()


def test_reopen_text_wrapper():
    raw = io.BytesIO('SET ISO8859-2\nżółw\n'.encode('ISO8859-2'))
    reader = FileReader(io.TextIOWrapper(raw, encoding='ISO8859-1'))
    assert next(reader) == (1, 'SET ISO8859-2')

    reader.reopen('ISO8859-2')
    assert list(reader) == [(1, 'SET ISO8859-2'), (2, 'żółw')]
    reader.close()
