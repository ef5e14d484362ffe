import io
import logging

import pytest

from wordforms.myspell import Dictionary
from wordforms.myspell.data.dic import WordPattern
from wordforms.myspell.errors import ConsumerError, FormatError, ProcessingError
from wordforms.myspell.readers import FileReader, read_aff, read_dic


AFF = """
SET UTF-8

SFX A Y 1
SFX A sc slem asc

PFX N N 1
PFX N 0 nie .
"""


def dictionary(words):
    aff, context = read_aff(FileReader(io.StringIO(AFF)))
    dic = read_dic(FileReader(io.StringIO(words)), context=context)
    return Dictionary(aff, dic)


def test_forms():
    dictionary_ = dictionary("2\nkrasc/AN\nkot\n")

    assert dictionary_.forms(WordPattern('krasc', 'A')) == ['krasc', 'krslem']
    assert list(dictionary_.all_forms()) == [
        ['krasc', 'krslem', 'niekrasc', 'niekrslem'],
        ['kot'],
    ]
    assert dictionary_.charset == 'UTF-8'


def test_all_forms_errors_propagate():
    with pytest.raises(FormatError):
        list(dictionary("1\nkrasc/Z\n").all_forms())


def test_process_all_forms():
    received = []
    report = dictionary("3\nkrasc/A\nkot\npies/N\n").process_all_forms(received.append)

    assert received == [['krasc', 'krslem'], ['kot'], ['pies', 'niepies']]
    assert report.processed == 3
    assert report.skipped == 0


def test_process_break_on_exception():
    received = []

    with pytest.raises(ProcessingError) as e:
        dictionary("3\nkrasc/A\nkot/Z\npies/N\n").process_all_forms(received.append)

    assert e.value.word == WordPattern('kot', 'Z')
    assert isinstance(e.value.__cause__, FormatError)
    assert received == [['krasc', 'krslem']]


def test_process_skip_errors(caplog):
    received = []

    with caplog.at_level(logging.WARNING):
        report = dictionary("3\nkrasc/A\nkot/Z\npies/N\n").process_all_forms(
            received.append, break_on_exception=False
        )

    assert received == [['krasc', 'krslem'], ['pies', 'niepies']]
    assert report.processed == 2
    assert report.skipped == 1
    assert report.failures[0].word == WordPattern('kot', 'Z')
    assert 'Error occurred during word forms processing' in caplog.text


def test_process_consumer_errors():
    def consumer(forms):
        if forms[0] == 'kot':
            raise ConsumerError('no cats allowed')

    with pytest.raises(ProcessingError) as e:
        dictionary("2\nkot\npies\n").process_all_forms(consumer)
    assert isinstance(e.value.__cause__, ConsumerError)

    report = dictionary("2\nkot\npies\n").process_all_forms(consumer, break_on_exception=False)
    assert report.processed == 1
    assert report.skipped == 1
    assert isinstance(report.failures[0].__cause__, ConsumerError)


def test_process_unexpected_errors_propagate():
    def consumer(forms):
        raise RuntimeError('unexpected')

    with pytest.raises(RuntimeError):
        dictionary("1\nkot\n").process_all_forms(consumer, break_on_exception=False)


def test_process_in_threads():
    words = ['krasc/A', 'wasc/AN', 'kot/Z', 'pies/N'] * 700
    dictionary_ = dictionary(f"{len(words)}\n" + "\n".join(words))

    sequential = []
    sequential_report = dictionary_.process_all_forms(sequential.append, break_on_exception=False)

    threaded = []
    threaded_report = dictionary_.process_all_forms(threaded.append, break_on_exception=False, workers=2)

    assert threaded == sequential
    assert threaded_report.processed == sequential_report.processed == 2100
    assert threaded_report.skipped == sequential_report.skipped == 700


def test_process_in_threads_break_on_exception():
    words = ['krasc/A', 'kot/N'] * 1250 + ['pies/Z'] + ['krasc/A', 'wasc/Y'] * 500
    dictionary_ = dictionary(f"{len(words)}\n" + "\n".join(words))

    received = []
    with pytest.raises(ProcessingError) as e:
        dictionary_.process_all_forms(received.append, workers=2)

    assert e.value.word == WordPattern('pies', 'Z')
    assert len(received) == 2500
    assert received[:2] == [['krasc', 'krslem'], ['kot', 'niekot']]


def test_write_full_dictionary():
    out = io.StringIO()
    dictionary("3\nkrasc/A\nkot\npies/N\n").write_full_dictionary(out, ignored=['kot'])

    assert out.getvalue() == "krasc,krslem\npies,niepies\n"


def test_write_full_dictionary_stops_on_error():
    out = io.StringIO()

    with pytest.raises(ProcessingError):
        dictionary("2\nkrasc/Z\nkot\n").write_full_dictionary(out)

    assert out.getvalue() == ""
