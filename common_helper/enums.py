"""Lookup of enumerated constants by their string representation."""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

EnumCandidates = Mapping[Any, Any] | type[Enum] | Iterable[tuple[Any, Any]]


def _candidate_pairs(enum_set: EnumCandidates) -> Iterable[tuple[Any, Any]]:
    if isinstance(enum_set, type) and issubclass(enum_set, Enum):
        # Members are matched on their value but returned whole
        return ((member.value, member) for member in enum_set.__members__.values())
    if isinstance(enum_set, Mapping):
        return ((value, value) for value in enum_set.values())
    return ((value, value) for _, value in enum_set)


def find_enum_type(enum_set: EnumCandidates, target: str) -> Any | None:
    """Find the first candidate whose stringified value equals ``target``.

    Candidates are scanned in their natural order, so when two values share
    the same string form the earlier one wins.

    Values are compared using Python's ``str()``, so targets must use the
    Python string form: ``"True"`` for ``True`` and ``"1.0"`` for ``1.0``.

    Args:
        enum_set: A mapping, an ``Enum`` subclass, or an ordered iterable of
            ``(key, value)`` pairs.
        target: String form of the value being looked up.

    Returns:
        The matching value with its original type (the member itself for
        ``Enum`` classes), or ``None`` when nothing matches.
    """
    for comparable, result in _candidate_pairs(enum_set):
        if str(comparable) == target:
            return result

    logger.debug("No enum candidate matches '%s'", target)
    return None
