"""
Generation Utilities

Helpers for turning raw form input into GenerationRequest fields.
"""

import re
from typing import List, Optional


RECIPIENT_SEPARATORS = re.compile(r"[\n,;]+")


def split_mailing_list(mailing_list: Optional[str]) -> List[str]:
    """
    Split a pasted mailing list into addresses.

    Entries may be separated by newlines, commas or semicolons. Whitespace is
    stripped and empty entries dropped. Duplicates are kept.
    """
    if not mailing_list:
        return []
    entries = (entry.strip() for entry in RECIPIENT_SEPARATORS.split(mailing_list))
    return [entry for entry in entries if entry]


def count_recipients(mailing_list: Optional[str]) -> int:
    """Number of addresses in a pasted mailing list."""
    return len(split_mailing_list(mailing_list))
