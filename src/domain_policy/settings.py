"""User settings loaded from YAML configuration files."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .dns_resolver import DnsResolver
from .psl.source import DEFAULT_FETCH_TIMEOUT, PUBLIC_SUFFIX_LIST_URL

CONFIG_DIR_NAME = "domain-policy-check"
CONFIG_FILE_NAME = "config.yaml"
TEMPLATE_DIR_NAME = "templates"

_SCHEMA_PACKAGE = "domain_policy.resources"
_SCHEMA_FILENAME = "settings.schema.json"

SYSTEM_CONFIG_DIRS = [
    Path("/etc") / CONFIG_DIR_NAME,
    Path("/usr/local/etc") / CONFIG_DIR_NAME,
]

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Settings:
    """Runtime settings for lookups and suffix list retrieval.

    Attributes:
        suffix_list_url (str): Public Suffix List URL or local path.
        suffix_list_timeout (float): HTTP timeout for the suffix list fetch.
        dns_nameservers (Tuple[str, ...]): Nameservers to query, empty for system defaults.
        dns_timeout (Optional[float]): Per-query DNS timeout in seconds.
        dns_lifetime (Optional[float]): Total DNS lookup lifetime in seconds.
        dns_use_tcp (bool): Whether DNS queries use TCP.
    """

    suffix_list_url: str = PUBLIC_SUFFIX_LIST_URL
    suffix_list_timeout: float = DEFAULT_FETCH_TIMEOUT
    dns_nameservers: Tuple[str, ...] = ()
    dns_timeout: Optional[float] = None
    dns_lifetime: Optional[float] = None
    dns_use_tcp: bool = False

    def build_resolver(self) -> DnsResolver:
        """Create a DNS resolver configured from these settings.

        Returns:
            DnsResolver: Configured resolver.
        """
        return DnsResolver(
            nameservers=self.dns_nameservers or None,
            timeout=self.dns_timeout,
            lifetime=self.dns_lifetime,
            use_tcp=self.dns_use_tcp,
        )


def external_config_dirs() -> List[Path]:
    """Return directories that may contain configuration.

    Returns:
        List[Path]: Ordered list of user and system config directories.
    """
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        user_dir = Path(xdg_home) / CONFIG_DIR_NAME
    else:
        user_dir = Path.home() / ".config" / CONFIG_DIR_NAME
    return [user_dir, *SYSTEM_CONFIG_DIRS]


@lru_cache(maxsize=1)
def _load_schema_validator() -> Draft202012Validator:
    """Load and cache the settings JSON Schema validator.

    Returns:
        Draft202012Validator: Validator for settings payloads.
    """
    schema_text = (
        resources.files(_SCHEMA_PACKAGE).joinpath(_SCHEMA_FILENAME).read_text(encoding="utf-8")
    )
    return Draft202012Validator(json.loads(schema_text))


def _schema_error_text(err: ValidationError) -> str:
    """Render one schema validation error.

    Args:
        err (ValidationError): JSON Schema validation error.

    Returns:
        str: ``location: message`` text.
    """
    location = ".".join(str(part) for part in err.absolute_path) or "<root>"
    return f"{location}: {err.message}"


def collect_settings_errors(payload: object) -> List[str]:
    """Validate a settings payload.

    Args:
        payload (object): Parsed YAML document.

    Returns:
        List[str]: Sorted validation error messages, empty when valid.
    """
    validator = _load_schema_validator()
    return sorted(_schema_error_text(err) for err in validator.iter_errors(payload))


def find_settings_file() -> Optional[Path]:
    """Locate the first existing configuration file.

    Returns:
        Optional[Path]: Config file path, or None if none exists.
    """
    for base_dir in external_config_dirs():
        candidate = base_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def settings_from_mapping(payload: dict) -> Settings:
    """Build settings from a validated configuration mapping.

    Args:
        payload (dict): Configuration document.

    Returns:
        Settings: Settings with defaults for absent keys.
    """
    suffix_list = payload.get("suffix_list") or {}
    dns_section = payload.get("dns") or {}
    return Settings(
        suffix_list_url=suffix_list.get("url", PUBLIC_SUFFIX_LIST_URL),
        suffix_list_timeout=float(suffix_list.get("timeout", DEFAULT_FETCH_TIMEOUT)),
        dns_nameservers=tuple(dns_section.get("nameservers", ())),
        dns_timeout=dns_section.get("timeout"),
        dns_lifetime=dns_section.get("lifetime"),
        dns_use_tcp=bool(dns_section.get("use_tcp", False)),
    )


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """Load settings from YAML.

    Args:
        path (Optional[Path | str]): Explicit config file. When omitted the
            standard config directories are searched.

    Returns:
        Settings: Loaded settings, or defaults when no file exists.

    Raises:
        ValueError: If the file cannot be read, is not valid YAML, or fails
            schema validation.
    """
    config_path = Path(path).expanduser() if path is not None else find_settings_file()
    if config_path is None:
        LOGGER.debug("No configuration file found, using defaults")
        return Settings()
    LOGGER.info("Loading settings from %s", config_path)
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as err:
        raise ValueError(f"Settings file {config_path} could not be read: {err}") from err
    except yaml.YAMLError as err:
        raise ValueError(f"Settings file {config_path} is not valid YAML: {err}") from err
    if payload is None:
        payload = {}
    errors = collect_settings_errors(payload)
    if errors:
        details = "; ".join(errors)
        raise ValueError(f"Settings file {config_path} is invalid: {details}")
    return settings_from_mapping(payload)


__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "Settings",
    "TEMPLATE_DIR_NAME",
    "collect_settings_errors",
    "external_config_dirs",
    "find_settings_file",
    "load_settings",
    "settings_from_mapping",
]
