"""
wclist - Mining Warden's Court cause list extraction.

Reconstructs objection, forfeiture and exemption records from the text of a
published cause list PDF and matches them against a lawyer's client matters.
"""

__version__ = "0.1.0"

from wclist.model import (
    ClientMatter,
    ExemptionRecord,
    ForfeitureRecord,
    ObjectionRecord,
    Record,
    SectionType,
)
from wclist.config import Config, load_config
from wclist.cause_list import CauseList
from wclist.matcher import MatchResult, search_assigned_matters
from wclist.matters import Lawyer, load_matters
from wclist.parser import parse_page_text, reconstruct_table_rows
from wclist.writers import write_outputs

__all__ = [
    "ClientMatter",
    "ExemptionRecord",
    "ForfeitureRecord",
    "ObjectionRecord",
    "Record",
    "SectionType",
    "Config",
    "load_config",
    "CauseList",
    "MatchResult",
    "search_assigned_matters",
    "Lawyer",
    "load_matters",
    "parse_page_text",
    "reconstruct_table_rows",
    "write_outputs",
]
