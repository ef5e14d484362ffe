"""
The module represents data from MySpell's ``*.aff`` file.

This text file has the following format:

.. code-block:: text

    SET ISO8859-2        # charset of both .aff and .dic files

    # rule set header: kind, symbol, cross-product flag, number of rules
    SFX A Y 2
    # rules: kind, symbol, strip, add, condition
    SFX A   sc    slem   [^w]asc
    SFX A   0     ami    .

    PFX B N 1
    PFX B   nie   0      nie(([^b])|(.[^o]))

Tokens are separated by any number of spaces; ``0`` in strip/add/condition position means "nothing";
everything after ``#`` is a comment.

The :class:`Aff` class stores the charset and all rule sets, indexed by their symbol.

``Aff``
-------

.. autoclass:: Aff

.. autodata:: RuleTable

``AffixRule`` and ``AffixRuleSet``
----------------------------------

.. autoclass:: AffixRule
    :members:
.. autoclass:: AffixRuleSet
    :members:
"""

import re

from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from wordforms.myspell.errors import FormatError


SUFFIX_TAG = 'SFX'
PREFIX_TAG = 'PFX'
YES_TAG = 'Y'
NO_TAG = 'N'

#: Token meaning "empty string" in strip, add and condition positions of a rule line
EMPTY_TOKEN = '0'

COUNT_REGEXP = re.compile(r'\d+')


@dataclass(frozen=True)
class AffixRule:
    """
    Single line of a rule set, like

    .. code-block:: text

        SFX A   sc    slem   [^w]asc

    Meaning of the line:

    * It is a suffix rule (the kind is inherited from the rule set header, see :class:`AffixRuleSet`)
    * ...of the set designated by symbol ``A``
    * ...which strips ``sc`` from the end of the base form
    * ...and adds ``slem`` instead
    * ...but only for words matching ``[^w]asc`` at the end.

    So, ``krasc`` becomes ``krslem``, while ``wasc`` and ``milosc`` aren't affected at all.

    The condition is a regular expression, anchored at the beginning of the word for prefixes
    (``^<condition>.*$``) and at the end for suffixes (``^.*<condition>$``). The whole word should
    match.

    Rules are values: two rules with the same kind, strip, add and condition are equal, and the
    rule set keeps only one of them.
    """

    #: Whether the rule changes the beginning of the word (otherwise, its end)
    is_prefix: bool
    #: What is removed from the base form ("" if nothing)
    strip: str = ''
    #: What is added instead of :attr:`strip` ("" if nothing)
    add: str = ''
    #: Regular expression the base form should match ("" if no extra condition)
    condition: str = ''

    def __post_init__(self):
        if self.condition:
            if self.is_prefix:
                regexp = re.compile('^' + self.condition + '.*$')
            else:
                regexp = re.compile('^.*' + self.condition + '$')
        else:
            regexp = None
        object.__setattr__(self, 'cond_regexp', regexp)

    @classmethod
    def parse(cls, line: str, *, rule_set: 'AffixRuleSet', line_no: Optional[int] = None) -> 'AffixRule':
        """
        Parses rule line belonging to the ``rule_set``. The line should have exactly 5 tokens, and the
        symbol should be the same as the rule set's.

        Note that the kind of the rule (prefix or suffix) is taken from the rule set, not from the
        first token of the line.
        """

        tokens = line.split()
        if len(tokens) != 5:
            raise FormatError('Invalid number of parameters.', line_no=line_no, line=line)

        _, symbol, strip, add, condition = tokens
        if symbol != rule_set.symbol:
            raise FormatError(f"Wrong symbol : '{symbol}' . '{rule_set.symbol}' was expected.",
                              line_no=line_no, line=line)

        try:
            return cls(
                is_prefix=rule_set.is_prefix,
                strip=('' if strip == EMPTY_TOKEN else strip),
                add=('' if add == EMPTY_TOKEN else add),
                condition=('' if condition == EMPTY_TOKEN else condition)
            )
        except re.error as e:
            raise FormatError(f'Invalid condition: {e}', line_no=line_no, line=line) from e

    def matches(self, base_form: str) -> bool:
        """
        Whether the rule can be applied to the base form: the form should start (for prefixes) or end
        (for suffixes) with :attr:`strip`, and match the :attr:`condition`.
        """

        if self.is_prefix:
            if self.strip and not base_form.startswith(self.strip):
                return False
        else:
            if self.strip and not base_form.endswith(self.strip):
                return False

        if self.cond_regexp is None:
            return True
        return self.cond_regexp.fullmatch(base_form) is not None

    def apply(self, base_form: str) -> str:
        """
        Produces the form: cuts ``len(strip)`` chars from the corresponding end of the word and attaches
        :attr:`add`. It doesn't check the condition, so should be called for matching forms only
        (see :meth:`matches`).

        Raises:
            ValueError: if the word is shorter than :attr:`strip`
        """

        if len(base_form) < len(self.strip):
            raise ValueError(f"{base_form!r} is shorter than strip text {self.strip!r}")

        if self.is_prefix:
            return self.add + base_form[len(self.strip):]
        return base_form[:len(base_form) - len(self.strip)] + self.add

    def __repr__(self):
        kind = 'Prefix' if self.is_prefix else 'Suffix'
        return f"{kind}(-{self.strip or '0'} +{self.add or '0'} on [{self.condition}])"


@dataclass
class AffixRuleSet:
    """
    Group of rules sharing one symbol, declared by a header line:

    .. code-block:: text

        SFX A Y 2

    Meaning of the header:

    * Suffix rules (can be ``PFX`` for prefix)
    * ...designated by symbol ``A`` (exactly one character)
    * ...can be combined with prefixes (``Y`` or ``N``): for a word having both ``A`` and some prefix
      set, the suffix is also applied to the prefixed forms
    * ...and there are 2 of them below

    The combinability flag is consulted for suffix sets only.
    """

    #: Symbol used in the ``*.dic`` file to refer to the set
    symbol: str
    #: Whether the set contains prefixes (otherwise, suffixes)
    is_prefix: bool
    #: Whether the suffixes of this set may be applied on top of prefixed forms
    combinable: bool
    #: Number of rules: as declared in the header until the first rule is added, the real number after
    rule_count: int
    #: The rules themselves
    rules: Set[AffixRule] = field(default_factory=set)

    @property
    def is_suffix(self) -> bool:
        return not self.is_prefix

    @classmethod
    def parse(cls, line: str, *, line_no: Optional[int] = None) -> 'AffixRuleSet':
        """
        Parses header line. It should have exactly 4 tokens: ``SFX`` or ``PFX``, one-character symbol,
        ``Y`` or ``N``, and the number of rules.
        """

        def error(reason):
            return FormatError(reason, line_no=line_no, line=line)

        tokens = line.split()
        if len(tokens) != 4:
            raise error('Invalid number of tokens in line. 4 tokens is required.')

        kind, symbol, combinable, count = tokens
        if kind not in (SUFFIX_TAG, PREFIX_TAG):
            raise error('Invalid first token. Suffix or prefix declaration is required.')
        if len(symbol) != 1:
            raise error('A rule symbol has to be a single character.')
        if combinable not in (YES_TAG, NO_TAG):
            raise error(f"'{YES_TAG}' or '{NO_TAG}' character is required as third token.")
        if not COUNT_REGEXP.fullmatch(count):
            raise error('Invalid number of rules.')

        return cls(
            symbol=symbol,
            is_prefix=(kind == PREFIX_TAG),
            combinable=(combinable == YES_TAG),
            rule_count=int(count)
        )

    def add_rule(self, rule: AffixRule) -> None:
        """
        Adds rule to the set (adding an equal rule once more changes nothing) and updates
        :attr:`rule_count` to the current number of rules.
        """

        self.rules.add(rule)
        self.rule_count = len(self.rules)

    def __repr__(self):
        kind = PREFIX_TAG if self.is_prefix else SUFFIX_TAG
        return f"AffixRuleSet({kind} {self.symbol}{'×' if self.combinable else ''}: {len(self.rules)} rules)"


#: Rule sets indexed by symbol
RuleTable = Dict[str, AffixRuleSet]


@dataclass
class Aff:
    """
    Contents of the ``*.aff`` file. Typically, the user shouldn't create it directly, it is produced by
    :meth:`read_aff <wordforms.myspell.readers.aff.read_aff>` and then shared (read-only) by all
    word expansions.
    """

    #: Charset of ``*.aff`` and ``*.dic`` files, like ``ISO8859-2`` or ``UTF-8``
    SET: str
    #: All rule sets, by symbol
    rule_sets: RuleTable = field(default_factory=dict)

    def __repr__(self):
        return f"Aff(SET={self.SET}, {len(self.rule_sets)} rule sets)"
