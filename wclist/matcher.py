"""
Matching of client matters against cause list records.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

from wclist.log import get_logger
from wclist.model import (
    ClientMatter,
    Record,
    applying_party,
    objection_number,
    responding_party,
    tenement_number,
)

logger = get_logger(__name__)

NON_WORD_REGEX = re.compile(r"\W+")
WHITESPACE_REGEX = re.compile(r"\s+")

TENEMENT_MATCH = "Tenement number match"
CLIENT_APPLYING_MATCH = "Client name matches applying party"
CLIENT_RESPONDING_MATCH = "Client name matches responding party"
OTHER_APPLYING_MATCH = "Other party matches applying party"
OTHER_RESPONDING_MATCH = "Other party matches responding party"


class MatchResult:
    """A client matter found in a cause list."""

    def __init__(self, matter: ClientMatter, record: Record, reason: str):
        self.matter = matter
        self.record = record
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return (self.matter, self.record, self.reason) == (other.matter, other.record, other.reason)

    def __repr__(self) -> str:
        return (f"MatchResult(client={self.matter['client_name']!r}, "
                f"matter_number={self.record['matter_number']}, reason={self.reason!r})")

    def to_dict(self) -> Dict[str, Any]:
        """Convert match result to dictionary."""
        return {
            "client_name": self.matter["client_name"],
            "client_tenement_number": self.matter.get("tenement_number", ""),
            "kind": self.record["kind"],
            "matter_number": self.record["matter_number"],
            "objection_number": objection_number(self.record),
            "tenement_number": tenement_number(self.record),
            "applying_party": applying_party(self.record),
            "responding_party": responding_party(self.record),
            "reason": self.reason,
        }


def normalize_name(name: str) -> str:
    """
    Normalize a party name for comparison.

    Args:
        name: Name to normalize

    Returns:
        Lower-case name with punctuation replaced by single spaces
    """
    name = NON_WORD_REGEX.sub(" ", name.lower())
    return WHITESPACE_REGEX.sub(" ", name).strip()


def names_match(name1: Optional[str], name2: Optional[str]) -> bool:
    """
    Check if two party names refer to the same party.

    Names match when they are equal after normalization, or when one
    contains the other. Abbreviations only match if they happen to be a
    substring ("Smith" in "John Smith", not "J Smith").

    Args:
        name1: First name
        name2: Second name

    Returns:
        True if names match, False otherwise
    """
    if not name1 or not name2:
        return False

    norm1 = normalize_name(name1)
    norm2 = normalize_name(name2)
    if not norm1 or not norm2:
        return False

    return norm1 == norm2 or norm1 in norm2 or norm2 in norm1


def match_reasons(matter: ClientMatter, record: Record) -> List[str]:
    """
    List every reason a client matter matches a record.

    Args:
        matter: Client matter
        record: Cause list record

    Returns:
        Reasons in rule order, each at most once
    """
    reasons = []
    applying = applying_party(record)
    responding = responding_party(record)

    matter_tenement = matter.get("tenement_number") or ""
    if matter_tenement and matter_tenement.lower() == tenement_number(record).lower():
        reasons.append(TENEMENT_MATCH)

    client_name = matter.get("client_name", "")
    if names_match(client_name, applying):
        reasons.append(CLIENT_APPLYING_MATCH)
    if names_match(client_name, responding):
        reasons.append(CLIENT_RESPONDING_MATCH)

    other_parties = matter.get("other_party_names") or []
    if any(names_match(other, applying) for other in other_parties):
        reasons.append(OTHER_APPLYING_MATCH)
    if any(names_match(other, responding) for other in other_parties):
        reasons.append(OTHER_RESPONDING_MATCH)

    return reasons


def is_match(matter: ClientMatter, record: Record) -> Tuple[bool, str]:
    """
    Check if a client matter matches a record.

    Args:
        matter: Client matter
        record: Cause list record

    Returns:
        Tuple of (matched, highest-priority reason or "")
    """
    reasons = match_reasons(matter, record)
    if reasons:
        return True, reasons[0]
    return False, ""


def search_assigned_matters(records: Iterable[Record], matters: Iterable[ClientMatter]) -> List[MatchResult]:
    """
    Find every record that matches any of the given client matters.

    Args:
        records: Cause list records
        matters: Client matters to look for

    Returns:
        One result per (matter, record, reason)
    """
    records = list(records)
    results = []

    for matter in matters:
        for record in records:
            for reason in match_reasons(matter, record):
                results.append(MatchResult(matter, record, reason))

    logger.info(f"Found {len(results)} matches across {len(records)} records")
    return results
