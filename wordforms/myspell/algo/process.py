"""
Feeding all forms of all dictionary words to a consumer.

A consumer is any callable accepting the list of forms of one word (base form first), like
:class:`FullDictionaryWriter <wordforms.myspell.consumers.FullDictionaryWriter>`. It signals its own
failures with :class:`ConsumerError <wordforms.myspell.errors.ConsumerError>`.

Words are processed in the order of the ``*.dic`` file. Failure to expand a word (or to consume its
forms) either stops processing, or is logged and the word is skipped, depending on
``break_on_exception``.

Expansion of different words is independent (rule sets are never changed after reading), so it can
be done in several threads; the results are still passed to the consumer one by one, in the order of
the dictionary.

.. autoclass:: Processor
.. autoclass:: ProcessingReport
"""

import itertools
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from wordforms.myspell import data
from wordforms.myspell.errors import ConsumerError, FormatError, ProcessingError


logger = logging.getLogger(__name__)

Consumer = Callable[[List[str]], None]

#: Expansion result: forms, or the error that happened instead
Expansion = Tuple[data.dic.WordPattern, Union[List[str], FormatError]]

PROGRESS_STEP = 1000


@dataclass
class ProcessingReport:
    """
    Result of :meth:`Processor.__call__`.
    """

    #: Number of words whose forms were successfully consumed
    processed: int = 0
    #: Words skipped because of errors
    failures: List[ProcessingError] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.failures)


class Processor:
    """
    Usage::

        processor = Processor(aff, dic)
        report = processor(print, break_on_exception=False)
        print(f"{report.processed} words, {report.skipped} skipped")

    .. automethod:: __call__
    """

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic):
        self.aff = aff
        self.dic = dic

    def __call__(self, consumer: Consumer, *,
                 break_on_exception: bool = True,
                 workers: Optional[int] = None) -> ProcessingReport:
        """
        Expands each word and passes the forms to ``consumer``.

        Args:
            consumer: Callable receiving the list of forms of each word
            break_on_exception: If ``True``, the first error stops processing (raised as
                                :class:`ProcessingError <wordforms.myspell.errors.ProcessingError>`),
                                otherwise failures are logged, collected into report, and the
                                next word is processed
            workers: If more than 1, expand words in that many threads
        """

        report = ProcessingReport()

        for i, (word, forms) in enumerate(self.expansions(workers=workers)):
            if i % PROGRESS_STEP == 0:
                logger.debug("%d words already processed", i)

            try:
                if isinstance(forms, FormatError):
                    raise ProcessingError(word, forms)
                try:
                    consumer(forms)
                except ConsumerError as e:
                    raise ProcessingError(word, e) from e
            except ProcessingError as e:
                if break_on_exception:
                    raise
                logger.warning("Error occurred during word forms processing.", exc_info=e)
                report.failures.append(e)
            else:
                report.processed += 1

        logger.info("%d words processed, %d skipped", report.processed, report.skipped)
        return report

    def expansions(self, *, workers: Optional[int] = None) -> Iterator[Expansion]:
        """
        Yields pairs of ``(word, forms or error)`` in the order of the dictionary.
        """

        if not workers or workers <= 1:
            yield from map(self.expand, self.dic.words)
            return

        # Bounded number of words in flight: executor.map would submit the whole dictionary at once
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for batch in batches(self.dic.words, workers * PROGRESS_STEP):
                yield from executor.map(self.expand, batch)

    def expand(self, word: data.dic.WordPattern) -> Expansion:
        try:
            return (word, word.expand(self.aff.rule_sets))
        except FormatError as e:
            return (word, e)


def batches(words: Iterable[data.dic.WordPattern], size: int) -> Iterator[List[data.dic.WordPattern]]:
    iterator = iter(words)
    batch = list(itertools.islice(iterator, size))
    while batch:
        yield batch
        batch = list(itertools.islice(iterator, size))
