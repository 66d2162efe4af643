"""Configuration management for genescan.

Configuration can come from:
- Default values
- A TOML configuration file
- Environment variables (``GENESCAN_*``)
- Command-line arguments

Example:
    >>> from genescan.config import Config
    >>> config = Config.load("genescan.toml")
    >>> config.scan.start_codon
    'atg'

A configuration file mirrors the container layout::

    [scan]
    initial_capacity = 64
    unterminated = "warn"

    [logging]
    verbosity = 2
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import attrs
import tomli_w

from genescan.core.alphabet import BASES
from genescan.core.codons import CODON_LENGTH, START_CODON, STOP_CODONS
from genescan.core.exceptions import ConfigurationError
from genescan.core.registry import DEFAULT_CAPACITY

# =============================================================================
# Default Configuration Values
# =============================================================================

UNTERMINATED_POLICIES = ("drop", "warn")

DEFAULT_UNTERMINATED = "drop"
DEFAULT_VERBOSITY = 1

ENV_PREFIX = "GENESCAN_"


# =============================================================================
# Validators
# =============================================================================


def _codon_errors(name: str, codon: str, alphabet: str) -> str | None:
    if len(codon) != CODON_LENGTH:
        return f"{name}: codon {codon!r} must be {CODON_LENGTH} bases long"
    bad = [base for base in codon if base not in alphabet]
    if bad:
        return f"{name}: codon {codon!r} contains non-bases {bad}"
    return None


def _check_codon(instance: Any, attribute: attrs.Attribute, value: str) -> None:
    error = _codon_errors(attribute.name, value, getattr(instance, "alphabet", BASES))
    if error:
        raise ConfigurationError(error)


def _check_alphabet(instance: Any, attribute: attrs.Attribute, value: str) -> None:
    if not value:
        raise ConfigurationError("alphabet must not be empty")
    # Runs before assignment on setattr, so codons are checked against the new value
    codons = [("start_codon", getattr(instance, "start_codon", None))]
    codons += [("stop_codons", codon) for codon in getattr(instance, "stop_codons", ())]
    for name, codon in codons:
        if codon is None:
            continue
        error = _codon_errors(name, codon, value)
        if error:
            raise ConfigurationError(f"alphabet {value!r} rejects {error}")


def _check_stop_codons(instance: Any, attribute: attrs.Attribute, value: tuple[str, ...]) -> None:
    if not value:
        raise ConfigurationError("stop_codons must not be empty")
    for codon in value:
        _check_codon(instance, attribute, codon)


def _check_positive(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ConfigurationError(f"{attribute.name} must be >= 1, got {value}")


def _check_policy(instance: Any, attribute: attrs.Attribute, value: str) -> None:
    if value not in UNTERMINATED_POLICIES:
        raise ConfigurationError(
            f"{attribute.name} must be one of {', '.join(UNTERMINATED_POLICIES)}, got {value!r}"
        )


def _check_verbosity(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ConfigurationError(f"{attribute.name} must be >= 0, got {value}")


# =============================================================================
# Configuration Classes
# =============================================================================


@attrs.define
class ScanConfig:
    """Configuration for codon scanning.

    Attributes:
        alphabet: Accepted base symbols (case-sensitive).
        start_codon: Codon that opens a gene.
        stop_codons: Codons that close a gene.
        initial_capacity: Initial slot count of the gene registry.
        unterminated: What to do with starts lacking a stop ("drop" or "warn").
        strip_line_endings: Strip trailing newlines from raw input files.
    """

    alphabet: str = attrs.field(default=BASES, validator=_check_alphabet)
    start_codon: str = attrs.field(default=START_CODON, validator=_check_codon)
    stop_codons: tuple[str, ...] = attrs.field(
        default=STOP_CODONS, converter=tuple, validator=_check_stop_codons
    )
    initial_capacity: int = attrs.field(default=DEFAULT_CAPACITY, validator=_check_positive)
    unterminated: str = attrs.field(default=DEFAULT_UNTERMINATED, validator=_check_policy)
    strip_line_endings: bool = True


@attrs.define
class LoggingConfig:
    """Configuration for logging.

    Attributes:
        verbosity: 0=warning, 1=info, 2=debug.
        log_file: Optional file receiving debug output.
    """

    verbosity: int = attrs.field(default=DEFAULT_VERBOSITY, validator=_check_verbosity)
    log_file: str | None = None


@attrs.define
class Config:
    """Main configuration container for genescan.

    Attributes:
        scan: Scanning configuration.
        logging: Logging configuration.
    """

    scan: ScanConfig = attrs.Factory(ScanConfig)
    logging: LoggingConfig = attrs.Factory(LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from a nested dictionary.

        Raises:
            ConfigurationError: On unknown sections, unknown keys or bad values.
        """
        sections = {"scan": ScanConfig, "logging": LoggingConfig}
        unknown = set(data) - set(sections)
        if unknown:
            raise ConfigurationError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

        kwargs = {}
        for name, section_cls in sections.items():
            values = data.get(name, {})
            if not isinstance(values, dict):
                raise ConfigurationError(f"[{name}] must be a table, got {type(values).__name__}")
            known = {a.name for a in attrs.fields(section_cls)}
            bad_keys = set(values) - known
            if bad_keys:
                raise ConfigurationError(f"Unknown keys in [{name}]: {', '.join(sorted(bad_keys))}")
            try:
                kwargs[name] = section_cls(**values)
            except TypeError as e:
                raise ConfigurationError(f"Invalid [{name}] configuration: {e}") from e
        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path | str | None = None, use_env: bool = True) -> "Config":
        """Load configuration from file and environment.

        Priority: environment > file > defaults.

        Args:
            path: Path to a TOML configuration file.
                  If None, starts from the default configuration.
            use_env: Apply ``GENESCAN_*`` environment overrides.

        Returns:
            Loaded configuration object.

        Raises:
            ConfigurationError: If the file is missing or invalid.
        """
        if path is None:
            config = cls()
        else:
            path = Path(path)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            try:
                with open(path, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e
            config = cls.from_dict(data)

        if use_env:
            config.apply_env()
        return config

    def apply_env(self, environ: dict[str, str] | None = None) -> None:
        """Override values from ``GENESCAN_*`` environment variables."""
        environ = os.environ if environ is None else environ

        env_mappings = {
            "INITIAL_CAPACITY": (self.scan, "initial_capacity", int),
            "UNTERMINATED": (self.scan, "unterminated", str),
            "VERBOSITY": (self.logging, "verbosity", int),
        }

        for suffix, (section, field_name, converter) in env_mappings.items():
            env_var = ENV_PREFIX + suffix
            value = environ.get(env_var)
            if not value:
                continue
            try:
                setattr(section, field_name, converter(value))
            except ValueError as e:
                raise ConfigurationError(f"Invalid environment variable {env_var}: {e}") from e
            attrs.validate(section)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        data = attrs.asdict(self)
        if data["logging"]["log_file"] is None:
            del data["logging"]["log_file"]
        return data

    def to_toml(self) -> str:
        """Render the configuration as TOML text."""
        return tomli_w.dumps(self.to_dict())

    def save(self, path: Path | str) -> None:
        """Save configuration to a TOML file."""
        Path(path).write_text(self.to_toml(), encoding="utf-8")

