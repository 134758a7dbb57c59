"""
Configuration module for wclist.
"""

import json
import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from wclist.model import ConfigError

# Lines that label table columns or sections rather than carry data
DEFAULT_HEADER_PHRASES = [
    "matter number",
    "objection number",
    "objector",
    "tenement affected",
    "applicant",
    "comments",
    "respondent",
    "exemption",
]

# Per-page stamps added by the publisher, e.g. "TNT-123456"
DEFAULT_FOOTER_PREFIXES = ["TNT-"]


class InputConfig(BaseModel):
    """
    Configuration for input.
    """

    paths: List[str] = ["./causelists/*.pdf"]  # Input file paths/globs
    skip_cover_page: bool = True  # Page 1 is a cover sheet with no records


class ParsingConfig(BaseModel):
    """
    Configuration for row reconstruction.
    """

    footer_prefixes: List[str] = Field(default_factory=lambda: list(DEFAULT_FOOTER_PREFIXES))
    header_phrases: List[str] = Field(default_factory=lambda: list(DEFAULT_HEADER_PHRASES))
    lookahead_lines: int = 15  # Lines collected after a matter number at most
    boundary_max_digits: int = 3  # Bare numbers this short start a new record


class OutputConfig(BaseModel):
    """
    Configuration for output.
    """

    json_path: Optional[str] = "./out/causelist.json"  # Records as JSON
    csv_path: Optional[str] = "./out/causelist.csv"  # Records as CSV
    matches_json_path: Optional[str] = None  # Match results as JSON
    matches_csv_path: Optional[str] = None  # Match results as CSV
    pretty_json: bool = True  # Whether to pretty-print JSON


class LoggingConfig(BaseModel):
    """
    Configuration for logging.
    """

    level: str = "INFO"  # Logging level (DEBUG/INFO/WARNING/ERROR)


class CauseListConfig(BaseModel):
    """
    Header metadata attached to cause lists read by the CLI.
    """

    jurisdiction: str = "Western Australia"
    warden: str = ""


class WebRetrievalConfig(BaseModel):
    """
    Configuration for web retrieval.
    """

    url: str  # Published cause list PDF
    timeout: float = 30.0  # Seconds per request
    max_retries: int = 3
    backoff_factor: float = 1.0


class Config(BaseModel):
    """
    Main configuration.
    """

    input: InputConfig = Field(default_factory=InputConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cause_list: CauseListConfig = Field(default_factory=CauseListConfig)
    web_retrieval: Optional[WebRetrievalConfig] = None  # Web retrieval config (optional)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from a file.
    
    Args:
        path: Path to the configuration file
        
    Returns:
        Configuration object
    """
    if path:
        if not (path.endswith(".yaml") or path.endswith(".yml") or path.endswith(".json")):
            raise ConfigError(f"Unsupported configuration file format: {path}")

        # Load configuration from file
        with open(path, "r") as f:
            if path.endswith(".json"):
                config_dict = json.load(f)
            else:
                config_dict = yaml.safe_load(f)

        # Create configuration object
        return Config(**(config_dict or {}))
    else:
        # Try to load from default locations
        default_locations = [
            "./config.yaml",
            "./config.yml",
            "./config.json",
            os.path.expanduser("~/.config/wclist/config.yaml"),
        ]

        for loc in default_locations:
            if os.path.exists(loc):
                return load_config(loc)

        # Return default configuration
        return Config()
