"""
Tests for the client matters module.
"""

import json

import pytest
import yaml

from wclist.matters import Lawyer, load_lawyer, load_matters, make_matter
from wclist.model import ConfigError


def test_make_matter():
    """Test creating a client matter."""
    matter = make_matter("  ACME PTY LTD ", None, ["Bloggs", "", "  ", " Jones "])

    assert matter == {
        "client_name": "ACME PTY LTD",
        "tenement_number": "",
        "other_party_names": ["Bloggs", "Jones"],
    }


def test_lawyer_add_assigned_matter():
    """Test assigning matters to a lawyer."""
    lawyer = Lawyer("Jane Counsel", "jane@example.org", "08 9000 0000")

    lawyer.add_assigned_matter("FOCUS MINERALS LTD", "L 15/474", ["Jones Mining"])

    assert len(lawyer.assigned) == 1
    assert lawyer.assigned[0]["tenement_number"] == "L 15/474"
    assert lawyer.to_dict()["name"] == "Jane Counsel"


def test_load_matters_yaml_list(tmp_path):
    """Test loading a plain list of matters."""
    path = tmp_path / "matters.yaml"
    path.write_text(yaml.safe_dump([
        {"client_name": "ACME PTY LTD", "tenement_number": "E 15/2082", "other_party_names": ["Bloggs"]},
        {"client_name": "RIVER GOLD PTY LTD", "other_party_names": "Smith"},
    ]))

    matters = load_matters(str(path))

    assert matters == [
        {"client_name": "ACME PTY LTD", "tenement_number": "E 15/2082", "other_party_names": ["Bloggs"]},
        {"client_name": "RIVER GOLD PTY LTD", "tenement_number": "", "other_party_names": ["Smith"]},
    ]


def test_load_lawyer_json(tmp_path):
    """Test loading a lawyer document."""
    path = tmp_path / "lawyer.json"
    path.write_text(json.dumps({
        "name": "Jane Counsel",
        "email": "jane@example.org",
        "assigned": [{"client_name": "ACME PTY LTD", "tenement_number": "E 15/2082"}],
    }))

    lawyer = load_lawyer(str(path))

    assert lawyer.name == "Jane Counsel"
    assert lawyer.email == "jane@example.org"
    assert lawyer.phone == ""
    assert lawyer.assigned[0]["other_party_names"] == []


def test_load_matters_missing_client_name(tmp_path):
    """Test that a matter without a client name is rejected."""
    path = tmp_path / "matters.yaml"
    path.write_text(yaml.safe_dump([{"tenement_number": "E 15/2082"}]))

    with pytest.raises(ConfigError):
        load_matters(str(path))


@pytest.mark.parametrize("name,content", [
    ("matters.txt", "ACME"),
    ("matters.json", "{not json"),
    ("matters.yaml", "just a string"),
])
def test_load_matters_bad_file(tmp_path, name, content):
    """Test unreadable matters files."""
    path = tmp_path / name
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_matters(str(path))


def test_load_matters_missing_file(tmp_path):
    """Test a matters file that does not exist."""
    with pytest.raises(ConfigError):
        load_matters(str(tmp_path / "missing.yaml"))
