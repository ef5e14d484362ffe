"""

.. autofunction:: read_aff
.. autofunction:: detect_charset

.. autoclass:: Context
    :members:

"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from wordforms.myspell.data import aff
from wordforms.myspell.errors import FormatError

from wordforms.myspell.readers.file_reader import BaseReader


logger = logging.getLogger(__name__)

CHARSET_DIRECTIVE = 'SET '

PROGRESS_STEP = 1000


@dataclass
class Context:
    """
    Class containing reading-time context necessary for reading both .aff and .dic file.

    It is created in :meth:`read_aff` and then reused in :meth:`read_dic <wordforms.myspell.readers.dic.read_dic>`.
    """

    #: Encoding of dictionary (see :attr:`Aff.SET <wordforms.myspell.data.aff.Aff.SET>`)
    encoding: str


class OpenRuleSet(NamedTuple):
    """
    Rule set still receiving its rules while .aff file is read, and how many lines it still expects.
    """
    rule_set: aff.AffixRuleSet
    remaining: int


def detect_charset(source: BaseReader) -> str:
    """
    Finds ``SET <charset>`` line in the source (which should be opened in some single-byte encoding
    at this point, so any line is readable).

    Raises:
        FormatError: if there is no such line
    """

    for _, line in source:
        if line.startswith(CHARSET_DIRECTIVE):
            charset = line[len(CHARSET_DIRECTIVE):].strip()
            logger.debug("Detected charset name : %s", charset)
            return charset

    raise FormatError("Cannot find charset definition in the *.aff file.")


def read_aff(source: BaseReader) -> Tuple[aff.Aff, Context]:
    """
    Reads .aff file and creates an :class:`Aff <wordforms.myspell.data.aff.Aff>`.

    Reading is two-pass: first, the charset is found with :meth:`detect_charset`, then the source is
    reopened in this charset and read from the beginning.

    Lines starting with ``SFX``/``PFX`` are interpreted depending on whether some rule set is open:
    if it isn't, the line is a header opening the new set (see
    :meth:`AffixRuleSet.parse <wordforms.myspell.data.aff.AffixRuleSet.parse>`); otherwise it is
    the next rule of the open set. The set is closed after as many rule lines as its header declared.
    All other lines are ignored.

    Args:
         source: "Reader" (thin wrapper around opened file or zipfile, targeting line-by-line reading)

    Returns:
        Aff itself and a :class:`Context` which then will be reused in
        :meth:`read_dic <wordforms.myspell.readers.dic.read_dic>`
    """

    charset = detect_charset(source)
    source.reopen(charset)

    result = aff.Aff(SET=charset)
    current: Optional[OpenRuleSet] = None

    for num, line in source:
        if num % PROGRESS_STEP == 0:
            logger.debug(" number of loaded lines : %d", num)

        kind = line.split(maxsplit=1)[0]
        if kind not in (aff.SUFFIX_TAG, aff.PREFIX_TAG):
            continue

        if current is None:
            rule_set = aff.AffixRuleSet.parse(line, line_no=num)
            if rule_set.symbol in result.rule_sets:
                logger.warning("Rule set %s redefined at line %d", rule_set.symbol, num)
            result.rule_sets[rule_set.symbol] = rule_set
            current = OpenRuleSet(rule_set, rule_set.rule_count)
        else:
            rule_set = current.rule_set
            rule_set.add_rule(aff.AffixRule.parse(line, rule_set=rule_set, line_no=num))
            current = current._replace(remaining=current.remaining - 1)

        if current.remaining <= 0:
            current = None

    if current is not None:
        logger.warning("Rule set %s is missing %d rules at the end of file",
                       current.rule_set.symbol, current.remaining)

    return (result, Context(encoding=charset))
