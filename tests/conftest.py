"""
Pytest configuration and fixtures.
"""

from typing import List

import pytest

from wclist.config import Config
from wclist.model import ClientMatter, ForfeitureRecord, ObjectionRecord


@pytest.fixture
def sample_config():
    """Return a sample configuration."""
    return Config()


@pytest.fixture
def cover_page_text() -> str:
    """Return the text of a cover page."""
    return "\n".join([
        "WARDEN'S COURT",
        "CAUSE LIST",
        "KALGOORLIE",
        "Monday 3 March 2025 at 10:00am",
    ])


@pytest.fixture
def objection_page_text() -> str:
    """Return an objection page as flattened by text extraction."""
    return "\n".join([
        "WARDEN'S COURT - KALGOORLIE",
        "Matter Number",
        "Objection Number",
        "Objector",
        "Tenement Affected",
        "Applicant",
        "Comments",
        "1",
        "567890",
        "SMITH JOHN",
        "E 15/2082",
        "DOE JANE",
        "",
        "2",
        "567891",
        "Karorra (Higginsville) Pty Ltd",
        "P 15/6123",
        "FOCUS MINERALS LTD",
        "   ",
        "TNT-0001234",
    ])


@pytest.fixture
def forfeiture_page_text() -> str:
    """Return a forfeiture page whose columns survived extraction."""
    return "\n".join([
        "APPLICATIONS FOR FORFEITURE",
        "Matter Number    Tenement Affected    Applicant    Respondent    Comments",
        "10    M 15/1234    ACME MINING PTY LTD    BLOGGS JOE    Adjourned to 1 July",
        "11    P 16/99    SMITH JOHN    RIVER GOLD PTY LTD",
        "TNT-0001235",
    ])


@pytest.fixture
def exemption_page_text() -> str:
    """Return an exemption page whose columns survived extraction."""
    return "\n".join([
        "EXEMPTION APPLICATIONS",
        "20    E 70/4455    NORTHERN STAR LTD",
        "21    E 70/4456    NORTHERN STAR LTD    DEPT OF MINES",
    ])


@pytest.fixture
def objection_record() -> ObjectionRecord:
    """Return a sample objection record."""
    return {
        "kind": "objection",
        "matter_number": 1,
        "tenement_number": "E 15/2082",
        "comments": "",
        "objection_number": 567890,
        "objector_name": "SMITH JOHN",
        "applicant_name": "DOE JANE",
    }


@pytest.fixture
def forfeiture_record() -> ForfeitureRecord:
    """Return a sample forfeiture record."""
    return {
        "kind": "forfeiture",
        "matter_number": 10,
        "tenement_number": "M 15/1234",
        "comments": "Adjourned to 1 July",
        "applicant_name": "ACME MINING PTY LTD",
        "respondent_name": "BLOGGS JOE",
    }


@pytest.fixture
def sample_matters() -> List[ClientMatter]:
    """Return a list of client matters."""
    return [
        {
            "client_name": "Karorra (Higginsville) Pty Ltd",
            "tenement_number": "E 15/2082",
            "other_party_names": ["XYZ Corp", "DEF Industries"],
        },
        {
            "client_name": "FOCUS MINERALS LTD",
            "tenement_number": "L 15/474",
            "other_party_names": ["Jones Mining", "Brown Resources"],
        },
    ]
