"""
Configuration management for macro expansion.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ...logging_config import get_logger
from .naming import is_valid_identifier

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class Visibility(Enum):
    """Access level emitted in front of generated declarations."""

    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Visibility"]:
        """
        Parse a visibility name.

        Unrecognized values and None mean "no qualifier".
        """
        if isinstance(value, Visibility):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_tokens(cls, texts: Iterable[str]) -> Optional["Visibility"]:
        """Return the first recognized visibility among token texts."""
        for text in texts:
            visibility = cls.parse(text)
            if visibility is not None:
                return visibility
        return None


@dataclass
class GeneratorConfig:
    """Configuration for the identified-cases macro."""

    # Default qualifier when the attribute carries none
    visibility: Optional[Visibility] = None

    # Code style settings
    indent_size: int = 2
    use_tabs: bool = False

    # Generated names
    type_name: str = "ID"
    accessor_name: str = "id"
    raw_type: str = "String"
    conformances: List[str] = field(
        default_factory=lambda: ["Equatable", "CaseIterable"]
    )

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "visibility": self.visibility.value if self.visibility else None,
            "indent_size": self.indent_size,
            "use_tabs": self.use_tabs,
            "type_name": self.type_name,
            "accessor_name": self.accessor_name,
            "raw_type": self.raw_type,
            "conformances": list(self.conformances),
            **self.custom,
        }


_FIELD_TYPES: Dict[str, type] = {
    "indent_size": int,
    "use_tabs": bool,
    "type_name": str,
    "accessor_name": str,
    "raw_type": str,
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = GeneratorConfig().to_dict()

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args: Dict[str, Any] = {}
        custom_args: Dict[str, Any] = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        self._check_types(config_args)

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        raw_visibility = config_args.get("visibility")
        config_args["visibility"] = Visibility.parse(raw_visibility)
        if raw_visibility is not None and config_args["visibility"] is None:
            # Same rule as the attribute argument: unknown means no qualifier
            logger.warning("Ignoring unknown visibility %r in configuration", raw_visibility)

        if "conformances" in config_args:
            config_args["conformances"] = list(config_args["conformances"])

        return GeneratorConfig(**config_args)

    def _check_types(self, config_args: Dict[str, Any]):
        """Reject values whose JSON type does not match the field."""
        for key, expected in _FIELD_TYPES.items():
            if key not in config_args:
                continue
            value = config_args[key]
            # bool is an int subclass; only accept it where bool is expected
            if not isinstance(value, expected) or (
                isinstance(value, bool) and expected is not bool
            ):
                raise ConfigError(
                    f"Invalid {key}: expected {expected.__name__}, got {type(value).__name__} ({value!r})"
                )

        visibility = config_args.get("visibility")
        if visibility is not None and not isinstance(visibility, (str, Visibility)):
            raise ConfigError(f"Invalid visibility: expected string, got {visibility!r}")

        conformances = config_args.get("conformances", [])
        if not isinstance(conformances, (list, tuple)) or not all(
            isinstance(c, str) for c in conformances
        ):
            raise ConfigError(
                f"Invalid conformances: expected a list of strings, got {conformances!r}"
            )

        if not isinstance(config_args.get("custom", {}), dict):
            raise ConfigError("Invalid custom: expected an object")

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for name in ("type_name", "accessor_name", "raw_type"):
            value = getattr(config, name)
            if not is_valid_identifier(value):
                warnings.append(f"Invalid {name}: {value!r} is not a Swift identifier")

        for conformance in config.conformances:
            if not is_valid_identifier(conformance):
                warnings.append(f"Invalid conformance: {conformance!r}")

        if not config.use_tabs and config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
