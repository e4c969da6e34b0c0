"""
English noun pluralization.

The mapping rules only need one capability from an inflector: turning a
singular model name into the plural used by its controller. That capability
is expressed as the ``Pluralizer`` protocol so the rule table can be given a
different implementation (or a stub in tests).

The default implementation uses the Rails inflection rules from the
``inflection`` package. Those rules anchor at the end of the word, so compound
names such as ``line_item`` or ``admin/user`` pluralize their last word.
"""

from typing import Protocol, runtime_checkable

import inflection


@runtime_checkable
class Pluralizer(Protocol):
    """Anything able to pluralize a single word."""

    def plural(self, word: str) -> str:
        ...


class EnglishPluralizer:
    """Pluralizer backed by the Rails ActiveSupport inflection rules."""

    def plural(self, word: str) -> str:
        return inflection.pluralize(word)


default_pluralizer = EnglishPluralizer()


def pluralize(word: str) -> str:
    """Pluralize ``word`` with the default English rules."""
    return default_pluralizer.plural(word)
