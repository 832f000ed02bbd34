"""Configuration file loading and validation."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Iterator, Optional

from .errors import ConfigError

DEFAULT_RANDOM_LENGTH = 32
DEFAULT_RUN_COUNT = 1
DEFAULT_OUTPUT_FORMAT = "text"
OUTPUT_FORMATS = ("text", "json")
CONFIG_DIR = ".attester"
CONFIG_NAME = "config.yaml"


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class AttesterConfig:
    """Configuration for the attester driver."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration from dictionary.

        Args:
            data: Configuration dictionary from YAML
        """
        self.data = data or {}
        self._validate()

    def _validate(self) -> None:
        """Validate configuration schema."""
        if not isinstance(self.data, dict):
            raise ConfigError("configuration must be a dictionary")

        for section in ("random", "run", "output"):
            if section in self.data and not isinstance(self.data[section], dict):
                raise ConfigError(f"{section} must be a dictionary")

        random_section = self.data.get("random", {})
        if "length" in random_section and not _is_positive_int(random_section["length"]):
            raise ConfigError("random.length must be a positive integer")

        run_section = self.data.get("run", {})
        if "count" in run_section and not _is_positive_int(run_section["count"]):
            raise ConfigError("run.count must be a positive integer")

        output_section = self.data.get("output", {})
        if "format" in output_section and output_section["format"] not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output.format must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @property
    def random_length(self) -> int:
        """Number of random bytes to generate per attestation."""
        return self.data.get("random", {}).get("length", DEFAULT_RANDOM_LENGTH)

    @property
    def run_count(self) -> int:
        """Number of attestations produced by one run."""
        return self.data.get("run", {}).get("count", DEFAULT_RUN_COUNT)

    @property
    def output_format(self) -> str:
        """Output format: text or json."""
        return self.data.get("output", {}).get("format", DEFAULT_OUTPUT_FORMAT)

    def merge_with_cli_args(
        self,
        length: Optional[int] = None,
        count: Optional[int] = None,
        output_format: Optional[str] = None,
    ) -> "AttesterConfig":
        """
        Merge configuration with CLI arguments.
        CLI arguments take precedence over config file.

        Returns:
            New AttesterConfig with merged values
        """
        merged = _copy_sections(self.data)

        if length is not None:
            merged.setdefault("random", {})["length"] = length
        if count is not None:
            merged.setdefault("run", {})["count"] = count
        if output_format is not None:
            merged.setdefault("output", {})["format"] = output_format

        return AttesterConfig(merged)

    def apply_environment_overrides(self) -> "AttesterConfig":
        """
        Apply environment variable overrides.

        Environment variables:
        - ATTESTER_RANDOM_LENGTH: Override random value length
        - ATTESTER_RUN_COUNT: Override number of attestations per run
        - ATTESTER_OUTPUT_FORMAT: Override output format

        Returns:
            New AttesterConfig with environment overrides applied

        Raises:
            ConfigError: If an override is not a valid value
        """
        merged = _copy_sections(self.data)

        random_length = os.getenv("ATTESTER_RANDOM_LENGTH")
        if random_length:
            merged.setdefault("random", {})["length"] = _parse_int(
                "ATTESTER_RANDOM_LENGTH", random_length
            )

        run_count = os.getenv("ATTESTER_RUN_COUNT")
        if run_count:
            merged.setdefault("run", {})["count"] = _parse_int(
                "ATTESTER_RUN_COUNT", run_count
            )

        output_format = os.getenv("ATTESTER_OUTPUT_FORMAT")
        if output_format:
            merged.setdefault("output", {})["format"] = output_format

        return AttesterConfig(merged)


def _copy_sections(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in data.items()
    }


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def load_config(config_path: str) -> AttesterConfig:
    """
    Load configuration from YAML file.

    Raises:
        ConfigError: If config file is not valid YAML
        FileNotFoundError: If config file doesn't exist
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    return AttesterConfig(data)


def _config_candidates() -> Iterator[Path]:
    """Yield .attester/config.yaml from cwd up to the git root, then home."""
    current = Path.cwd()
    for directory in (current, *current.parents):
        yield directory / CONFIG_DIR / CONFIG_NAME
        if (directory / ".git").exists():
            break
    yield Path.home() / CONFIG_DIR / CONFIG_NAME


def find_default_config() -> Optional[Path]:
    """Return the first existing default config file, or None."""
    return next((path for path in _config_candidates() if path.exists()), None)


def load_default_config() -> AttesterConfig:
    """Load the default config file, or an empty config if there is none."""
    config_path = find_default_config()
    return load_config(str(config_path)) if config_path else AttesterConfig()
