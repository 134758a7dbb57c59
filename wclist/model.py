"""
Data models for wclist.
"""

from enum import Enum
from typing import List, TypedDict, Union


class SectionType(Enum):
    """
    Categories of scheduled matter found in a cause list.
    """

    OBJECTION = "objection"
    FORFEITURE = "forfeiture"
    EXEMPTION = "exemption"
    UNKNOWN = "unknown"


class _RecordSource(TypedDict, total=False):
    source_page: int  # 1-based page the record was read from


class BaseRecord(_RecordSource):
    """
    Fields shared by every cause list record.
    """

    kind: str  # SectionType value, never "unknown"
    matter_number: int  # Court's identifier for the scheduled item
    tenement_number: str  # Format: "E 15/2082"
    comments: str  # Free text, "" when absent


class ObjectionRecord(BaseRecord):
    """
    An objection to a tenement application.
    """

    objection_number: int
    objector_name: str  # Responding party
    applicant_name: str  # Applying party


class ForfeitureRecord(BaseRecord):
    """
    An application for forfeiture of a tenement.
    """

    applicant_name: str
    respondent_name: str


class ExemptionRecord(BaseRecord):
    """
    An application for exemption from expenditure conditions.
    """

    applicant_name: str
    respondent_name: str


Record = Union[ObjectionRecord, ForfeitureRecord, ExemptionRecord]


class ClientMatter(TypedDict):
    """
    A matter a caller wants located in a cause list.
    """

    client_name: str
    tenement_number: str  # May be "" when unknown
    other_party_names: List[str]


def matter_number(record: Record) -> int:
    return record["matter_number"]


def tenement_number(record: Record) -> str:
    return record["tenement_number"]


def comments(record: Record) -> str:
    return record.get("comments", "")


def applying_party(record: Record) -> str:
    """
    Return the applying party of a record.

    Every category names its applying party ``applicant_name``.
    """
    return record.get("applicant_name", "")


def responding_party(record: Record) -> str:
    """
    Return the responding party of a record.

    Objections are answered by the objector, the other categories by a
    respondent.
    """
    if record["kind"] == SectionType.OBJECTION.value:
        return record.get("objector_name", "")
    return record.get("respondent_name", "")


def objection_number(record: Record):
    """
    Return the objection number, or None for non-objection records.
    """
    if record["kind"] == SectionType.OBJECTION.value:
        return record["objection_number"]
    return None


class WclistError(Exception):
    """Base class for all wclist exceptions."""

    pass


class DocumentError(WclistError):
    """Exception raised when a cause list document cannot be opened or read."""

    pass


class ConfigError(WclistError):
    """Exception raised for configuration errors."""

    pass


class OutputError(WclistError):
    """Exception raised for output errors."""

    pass


class FetchError(WclistError):
    """Exception raised when a cause list cannot be downloaded."""

    pass
