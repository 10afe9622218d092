"""
Configuration management for ldp-rdf.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings


class IdentifiersConfig(BaseModel):
    """Mapping between node paths and resource URIs."""

    base_uri: str = "http://localhost:8080/rest"


def _default_namespaces() -> dict[str, str]:
    return {
        "ldp": "http://www.w3.org/ns/ldp#",
        "fedora": "http://fedora.info/definitions/v4/repository#",
        "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
        "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
        "xsd": "http://www.w3.org/2001/XMLSchema#",
        "dc": "http://purl.org/dc/elements/1.1/",
        "dcterms": "http://purl.org/dc/terms/",
        "foaf": "http://xmlns.com/foaf/0.1/",
        "skos": "http://www.w3.org/2004/02/skos/core#",
        "premis": "http://www.loc.gov/premis/rdf/v1#",
    }


class NamespacesConfig(BaseModel):
    """Prefixes used to expand stored property names into predicate URIs."""

    prefixes: dict[str, str] = Field(default_factory=_default_namespaces)


class LdpConfig(BaseModel):
    """Container membership configuration."""

    # Reference property on a child that marks it as a member of its container
    member_back_reference: str = "fedora:memberOf"
    default_member_relation: str = "ldp:contains"
    has_member_relation: str = "ldp:hasMemberRelation"
    inserted_content_relation: str = "ldp:insertedContentRelation"


class RdfConfig(BaseModel):
    """Projection rules for stored properties."""

    excluded_prefixes: list[str] = Field(default_factory=lambda: ["jcr", "mode", "nt"])
    reference_suffix: str = "_ref"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None


class Settings(BaseSettings):
    """Main configuration class."""

    model_config = ConfigDict(
        env_prefix="LDPRDF_",
        env_nested_delimiter="__",
    )

    identifiers: IdentifiersConfig = Field(default_factory=IdentifiersConfig)
    namespaces: NamespacesConfig = Field(default_factory=NamespacesConfig)
    ldp: LdpConfig = Field(default_factory=LdpConfig)
    rdf: RdfConfig = Field(default_factory=RdfConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "ldprdf.yaml") -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Settings object with loaded configuration
    """
    config_file = Path(config_path)

    if config_file.exists():
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f) or {}
    else:
        config_dict = {}

    # Create settings, which will also load from environment variables
    settings = Settings(**config_dict)

    return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings instance so the next get_settings() reloads it."""
    global _settings
    _settings = None
