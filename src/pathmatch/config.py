"""Match configuration.

MatchOptions is a frozen dataclass — immutable after creation, shared freely
between matcher calls and cursors, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Options that change how literals compare and how captures merge.

    Both default to off. Override what you need::

        options = MatchOptions(case_insensitive=True)
    """

    # Fold ASCII letters when comparing literal segments
    case_insensitive: bool = False

    # On a repeated variable name keep the first captured value (default: last wins)
    keep_first_variable: bool = False


DEFAULT_OPTIONS = MatchOptions()
