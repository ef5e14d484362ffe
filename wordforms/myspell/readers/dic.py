import logging

from wordforms.myspell.data import dic
from wordforms.myspell.errors import FormatError

from wordforms.myspell.readers.file_reader import BaseReader
from wordforms.myspell.readers.aff import Context, PROGRESS_STEP


logger = logging.getLogger(__name__)


def read_dic(source: BaseReader, *, context: Context) -> dic.Dic:
    """
    Reads source (file or zipfile) and creates :class:`Dic <wordforms.myspell.data.dic.Dic>` from it.

    The first (non-empty, non-comment) line should be the number of words, each next line is parsed
    with :meth:`WordPattern.parse <wordforms.myspell.data.dic.WordPattern.parse>`.

    Args:
        source: "Reader" (thin wrapper around opened file or zipfile, targeting line-by-line reading),
                should be opened in ``context.encoding``
        context: Context created while reading .aff file
    """

    logger.debug("Reading words in %s", context.encoding)

    result = None

    for num, line in source:
        if num % PROGRESS_STEP == 0:
            logger.debug(" number of loaded lines : %d", num)

        if result is None:
            try:
                count = int(line)
            except ValueError as e:
                raise FormatError('Number of words expected.', line_no=num, line=line) from e
            result = dic.Dic(words=[], declared_count=count)
            continue

        result.append(dic.WordPattern.parse(line))

    if result is None:
        logger.warning("No words found")
        return dic.Dic(words=[])

    return result
