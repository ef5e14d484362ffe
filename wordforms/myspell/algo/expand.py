"""
Generation of all word forms from the base form and rule set symbols ("unmunching").

On a bird-eye view level:

* all rules of the word's rule sets are checked against the base form, and the matching ones are
  sorted into prefixes, suffixes, and suffixes that can be combined with prefixes (their rule set
  has ``Y`` in the header);
* each prefix produces a form, and each combinable suffix is applied on top of this form;
* each suffix (combinable or not) produces a form from the base form;
* produced forms are deduplicated and sorted, and the base form is put in front.

For example, with this ``*.aff``:

.. code-block:: text

    PFX A N 1
    PFX A 0 x .

    SFX B Y 1
    SFX B 0 Y .

...the word ``slon/AB`` produces ``["slon", "slonY", "xslon", "xslonY"]``.

Note that combinable suffixes are applied to prefixed forms without checking their condition
against the prefixed form: the condition is checked against the base form only. Also, a
combinable suffix always produces the form without the prefix, too.

The number of condition checks is proportional to the number of rules in word's sets, and the
number of combinations is (matching prefixes) × (matching combinable suffixes), both typically small.

.. autofunction:: expand
.. autofunction:: matching_rules
"""

from typing import List, Mapping, Set, Tuple

from wordforms.myspell.data.aff import AffixRule, AffixRuleSet
from wordforms.myspell.errors import FormatError


def expand(base_form: str, rule_symbols: str, rule_table: Mapping[str, AffixRuleSet]) -> List[str]:
    """
    Produces all forms of the word.

    Args:
        base_form: Word's base form
        rule_symbols: Symbols of the rule sets applicable to the word
        rule_table: All rule sets, by symbol

    Returns:
        The base form, followed by distinct derived forms in ascending order

    Raises:
        FormatError: if some of the symbols is absent in ``rule_table``, or some combination of prefix
                     and suffix can't be applied
    """

    if not rule_symbols:
        return [base_form]

    prefixes, suffixes, combinable = matching_rules(base_form, rule_symbols, rule_table)

    forms: Set[str] = set()

    for prefix in prefixes:
        prefixed = prefix.apply(base_form)
        forms.add(prefixed)
        for suffix in combinable:
            try:
                forms.add(suffix.apply(prefixed))
            except ValueError as e:
                raise FormatError(f"Cannot combine {prefix!r} and {suffix!r} for {base_form!r}: {e}") from e

    for suffix in suffixes:
        forms.add(suffix.apply(base_form))

    return [base_form, *sorted(forms)]


def matching_rules(base_form: str, rule_symbols: str, rule_table: Mapping[str, AffixRuleSet]
                   ) -> Tuple[Set[AffixRule], Set[AffixRule], Set[AffixRule]]:
    """
    Finds rules relevant for the base form.

    Returns:
        Three sets: matching prefixes, matching suffixes, and matching suffixes from combinable sets
        (subset of the second)
    """

    prefixes: Set[AffixRule] = set()
    suffixes: Set[AffixRule] = set()
    combinable: Set[AffixRule] = set()

    for symbol in rule_symbols:
        rule_set = rule_table.get(symbol)
        if rule_set is None:
            raise FormatError(f"Unknown rule-set symbol : {symbol!r}")

        for rule in rule_set.rules:
            if not rule.matches(base_form):
                continue
            if rule.is_prefix:
                prefixes.add(rule)
            else:
                suffixes.add(rule)
                if rule_set.combinable:
                    combinable.add(rule)

    return prefixes, suffixes, combinable
