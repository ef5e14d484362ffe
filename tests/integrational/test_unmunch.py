import zipfile
from pathlib import Path

import pytest

from wordforms.myspell import Dictionary
from wordforms.myspell.consumers import FormsTrieBuilder
from wordforms.myspell.data.dic import WordPattern
from wordforms.myspell.errors import FormatError


BASE_FOLDER = Path(__file__).parent / 'fixtures'

EXPECTED = [
    ['kot', 'kota', 'kotem', 'kotu', 'koty', 'niekot', 'niekota', 'niekotem', 'niekotu', 'niekoty'],
    ['krasc', 'krslem'],
    ['niewysoki', 'wysoki'],
    ['żaba', 'nieżaba', 'żabą', 'żabę'],
    ['niebo'],
    ['i'],
]


def read_dictionary(name):
    return Dictionary.from_files(str(BASE_FOLDER / name))


def read_dictionary_at(path):
    return Dictionary.from_files(str(path))


def test_from_files():
    dictionary = read_dictionary('pl_sample')

    assert dictionary.charset == 'ISO8859-2'
    assert set(dictionary.aff.rule_sets) == {'K', 'A', 'N', 'B', 'Ł'}
    assert dictionary.dic.declared_count == 6
    assert dictionary.dic.words[3] == WordPattern('żaba', 'ŁN')
    assert list(dictionary.all_forms()) == EXPECTED


def test_from_folder():
    dictionary = Dictionary.from_folder(str(BASE_FOLDER), 'pl_sample')

    assert list(dictionary.all_forms()) == EXPECTED


def test_from_zip(tmp_path):
    path = tmp_path / 'pl_sample.oxt'
    with zipfile.ZipFile(path, 'w') as archive:
        archive.write(BASE_FOLDER / 'pl_sample.aff', 'dictionaries/pl_sample.aff')
        archive.write(BASE_FOLDER / 'pl_sample.dic', 'dictionaries/pl_sample.dic')

    dictionary = Dictionary.from_zip(str(path))

    assert dictionary.charset == 'ISO8859-2'
    assert list(dictionary.all_forms()) == EXPECTED


def test_from_zip_without_dictionary(tmp_path):
    path = tmp_path / 'empty.zip'
    with zipfile.ZipFile(path, 'w') as archive:
        archive.writestr('README', 'nothing')

    with pytest.raises(LookupError):
        Dictionary.from_zip(str(path))


def test_from_files_path_object():
    dictionary = Dictionary.from_files(BASE_FOLDER / 'pl_sample')

    assert list(dictionary.all_forms()) == EXPECTED


def test_from_zip_several_dictionaries(tmp_path):
    path = tmp_path / 'several.oxt'
    with zipfile.ZipFile(path, 'w') as archive:
        archive.writestr('dictionaries/en_US.dic', '1\ncat\n')
        archive.writestr('dictionaries/en_GB.aff', 'SET UTF-8\n')
        archive.write(BASE_FOLDER / 'pl_sample.aff', 'dictionaries/pl_sample.aff')
        archive.write(BASE_FOLDER / 'pl_sample.dic', 'dictionaries/pl_sample.dic')

    dictionary = Dictionary.from_zip(str(path))

    assert dictionary.charset == 'ISO8859-2'
    assert list(dictionary.all_forms()) == EXPECTED


def test_from_system(monkeypatch):
    monkeypatch.setattr(Dictionary, 'PATHES', ['/nonexistent', str(BASE_FOLDER)])

    assert list(Dictionary.from_system('pl_sample').all_forms()) == EXPECTED

    with pytest.raises(LookupError):
        Dictionary.from_system('xx_XX')


def test_missing_files(tmp_path):
    with pytest.raises(OSError):
        Dictionary.from_files(str(tmp_path / 'nothing'))


def test_unknown_charset(tmp_path):
    (tmp_path / 'bad.aff').write_text("SET NO-SUCH-CHARSET\n", encoding='utf-8')
    (tmp_path / 'bad.dic').write_text("0\n", encoding='utf-8')

    with pytest.raises(LookupError):
        Dictionary.from_files(str(tmp_path / 'bad'))


def test_end_to_end_minimal(tmp_path):
    (tmp_path / 'min.aff').write_text("SET UTF-8\nSFX A Y 1\nSFX A sc slem asc\n", encoding='utf-8')
    (tmp_path / 'min.dic').write_text("1\nkrasc/A\n", encoding='utf-8')

    assert list(read_dictionary_at(tmp_path / 'min').all_forms()) == [['krasc', 'krslem']]


def test_broken_aff(tmp_path):
    (tmp_path / 'broken.aff').write_text("SET UTF-8\nSFX A Y 1\nSFX A sc slem\n", encoding='utf-8')
    (tmp_path / 'broken.dic').write_text("1\nkrasc/A\n", encoding='utf-8')

    with pytest.raises(FormatError) as e:
        read_dictionary_at(tmp_path / 'broken')
    assert e.value.line_no == 3


def test_write_full_dictionary(tmp_path):
    path = tmp_path / 'pl_sample.all'
    read_dictionary('pl_sample').write_full_dictionary(str(path), ignored=['i'])

    assert path.read_text(encoding='ISO8859-2').splitlines() == [
        ','.join(forms) for forms in EXPECTED[:-1]
    ]


def test_forms_trie():
    builder = FormsTrieBuilder()
    report = read_dictionary('pl_sample').process_all_forms(builder)

    assert report.processed == 6
    assert list(builder.words()) == sorted({form for forms in EXPECTED for form in forms})
    assert builder.bases('nieżaba') == ['żaba']
