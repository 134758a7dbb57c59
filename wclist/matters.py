"""
Client matters assigned to a lawyer.
"""

import json
from typing import Any, Dict, List, Optional

import yaml

from wclist.log import get_logger
from wclist.model import ClientMatter, ConfigError

logger = get_logger(__name__)


def make_matter(client_name: str, tenement_number: str = "",
                other_party_names: Optional[List[str]] = None) -> ClientMatter:
    """
    Create a client matter.
    
    Args:
        client_name: Name of the client
        tenement_number: Tenement in dispute, "" if unknown
        other_party_names: Names of the opposing parties
        
    Returns:
        Client matter
    """
    return {
        "client_name": (client_name or "").strip(),
        "tenement_number": (tenement_number or "").strip(),
        "other_party_names": [name.strip() for name in other_party_names or [] if name and name.strip()],
    }


class Lawyer:
    """A lawyer and the matters assigned to them."""

    def __init__(self, name: str, email: str = "", phone: str = ""):
        self.name = name
        self.email = email
        self.phone = phone
        self.assigned: List[ClientMatter] = []

    def add_assigned_matter(self, client_name: str, tenement_number: str = "",
                            other_party_names: Optional[List[str]] = None) -> ClientMatter:
        matter = make_matter(client_name, tenement_number, other_party_names)
        self.assigned.append(matter)
        return matter

    def to_dict(self) -> Dict[str, Any]:
        """Convert lawyer to dictionary."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "assigned": self.assigned,
        }


def _matter_from_dict(data: Dict[str, Any], index: int) -> ClientMatter:
    if not isinstance(data, dict):
        raise ConfigError(f"Matter {index}: expected a mapping, got {type(data).__name__}")
    if not data.get("client_name"):
        raise ConfigError(f"Matter {index}: missing client_name")

    other_party_names = data.get("other_party_names") or []
    if isinstance(other_party_names, str):
        other_party_names = [other_party_names]

    return make_matter(data["client_name"], data.get("tenement_number") or "", other_party_names)


def load_lawyer(path: str) -> Lawyer:
    """
    Load a lawyer and their assigned matters from a YAML or JSON file.

    The file holds either a list of matters, or a mapping with ``name``,
    ``email``, ``phone`` and an ``assigned`` list of matters.
    
    Args:
        path: Path to the matters file
        
    Returns:
        Lawyer with assigned matters
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.endswith(".json"):
                data = json.load(f)
            elif path.endswith(".yaml") or path.endswith(".yml"):
                data = yaml.safe_load(f)
            else:
                raise ConfigError(f"Unsupported matters file format: {path}")
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Error reading matters from {path}: {e}") from e

    if isinstance(data, list):
        lawyer = Lawyer(name="")
        assigned = data
    elif isinstance(data, dict):
        lawyer = Lawyer(data.get("name", ""), data.get("email", ""), data.get("phone", ""))
        assigned = data.get("assigned") or []
    else:
        raise ConfigError(f"Matters file {path} must hold a list or a mapping")

    for index, item in enumerate(assigned):
        lawyer.assigned.append(_matter_from_dict(item, index))

    logger.info(f"Loaded {len(lawyer.assigned)} matters from {path}")
    return lawyer


def load_matters(path: str) -> List[ClientMatter]:
    """
    Load client matters from a YAML or JSON file.
    
    Args:
        path: Path to the matters file
        
    Returns:
        List of client matters
    """
    return load_lawyer(path).assigned
