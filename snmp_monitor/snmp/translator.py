#!/usr/bin/env python3
"""
Translation of numeric trap varbinds into readable labels.
"""

from typing import List, Sequence, Tuple

from .constants import TRAP_KEY_LABELS, TRAP_TYPE_LABELS
from .parsers import Varbind


def _match_prefix(text: str, table: Sequence[Tuple[str, str]]) -> str:
    """Return the label of the first prefix in table that text starts with."""
    for prefix, label in table:
        if text.startswith(prefix):
            return label
    return text


def translate_varbind(varbind: Varbind) -> Varbind:
    """
    Rewrite a varbind's key to its semantic label and its value to a trap type name.

    Keys and values that match no known OID are returned unchanged, so
    translating an already translated varbind is a no-op.
    """
    key, value = varbind
    return _match_prefix(key, TRAP_KEY_LABELS), _match_prefix(value, TRAP_TYPE_LABELS)


def translate_varbinds(varbinds: Sequence[Varbind]) -> List[Varbind]:
    return [translate_varbind(varbind) for varbind in varbinds]
