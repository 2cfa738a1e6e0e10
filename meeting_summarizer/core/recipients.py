"""Recipient Parsing - turns the comma-separated recipient field into addresses.

Invariants:
    - Entries are split on ",", stripped, and empty entries dropped
    - Order and duplicates are preserved as typed by the user
    - Every kept entry must look like local@domain (one "@", a dot in the domain,
      no whitespace or RFC 5322 specials, and parseaddr must return it unchanged);
      the first offender raises InvalidRecipientError
"""

import re
from email.utils import parseaddr

from meeting_summarizer.core.errors import InvalidRecipientError

# RFC 5322 specials and whitespace are never part of a bare address
_PART = r"[^\s@,;:<>()\[\]\\\"]+"
_ADDRESS_RE = re.compile(rf"^{_PART}@{_PART}\.{_PART}$")


def split_recipients(raw: str) -> list[str]:
    """Split a comma-separated recipient string, dropping blank entries."""
    return [entry.strip() for entry in raw.split(",") if entry.strip()]


def parse_recipients(raw: str) -> list[str]:
    """Split and validate recipient addresses."""
    recipients = split_recipients(raw)
    for address in recipients:
        if not _ADDRESS_RE.match(address) or parseaddr(address)[1] != address:
            raise InvalidRecipientError(address)
    return recipients
