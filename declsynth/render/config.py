"""
Configuration management for the TypeScript printer.

Handles loading and merging configuration from JSON files,
providing presets and validation for printer settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class PrinterConfig:
    """Settings controlling how declaration trees are printed."""

    # Code style settings
    quote_style: str = "double"  # double, single
    semicolons: bool = True
    line_ending: str = "\n"

    # Identifier checks
    strict_identifiers: bool = False

    # Directory with *.ts.j2 templates overriding the built-in ones
    template_dir: Optional[str] = None

    # Custom settings, passed to templates untouched
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration presets, loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._presets: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load the built-in presets."""
        # Output of the TypeScript compiler's printer
        self._presets["typescript"] = {
            "quote_style": "double",
            "semicolons": True,
        }

        # StandardJS style
        self._presets["standard"] = {
            "quote_style": "single",
            "semicolons": False,
        }

    def get_config(
        self,
        preset: str = "typescript",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> PrinterConfig:
        """
        Get complete printer configuration.

        Args:
            preset: Name of the preset to start from
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        if preset not in self._presets:
            raise ConfigError(
                f"Unknown preset: {preset}. Available: {', '.join(self.list_presets())}"
            )

        base_config = dict(self._presets[preset])

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)
        for warning in self.validate_config(config):
            logger.warning("Printer configuration: %s", warning)
        return config

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

        logger.debug("Loaded printer configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> PrinterConfig:
        """Convert dictionary to PrinterConfig instance."""
        known_fields = {f.name for f in fields(PrinterConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in custom
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return PrinterConfig(**config_args)

    def save_config(self, config: PrinterConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_presets(self) -> list[str]:
        """Get list of available presets."""
        return list(self._presets.keys())

    def validate_config(self, config: PrinterConfig) -> list[str]:
        """
        Validate a printer configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.quote_style not in {"double", "single"}:
            warnings.append(f"Invalid quote_style: {config.quote_style}")

        if config.line_ending not in {"\n", "\r\n"}:
            warnings.append(f"Unusual line_ending: {config.line_ending!r}")

        if config.template_dir and not Path(config.template_dir).is_dir():
            warnings.append(f"Template directory not found: {config.template_dir}")

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
    preset: str = "typescript",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> PrinterConfig:
    """
    Convenience function to load configuration.

    Args:
        preset: Preset name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(preset, custom_config, config_file)
