from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

def load_default_config() -> Dict[str, Any]:
    if not DEFAULT_CONFIG_PATH.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {DEFAULT_CONFIG_PATH}. "
            "Please ensure config.yaml exists in the edge_gedcom directory."
        )
    try:
        with open(DEFAULT_CONFIG_PATH, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing config.yaml: {e}")

@dataclass
class ConverterConfig:
    """
    Configuration for a conversion run.

    Default values come from config.yaml in the edge_gedcom directory; a user
    file or dictionary only needs the keys it changes.
    """
    # Header
    source_system: Dict[str, str] = field(init=False)
    gedcom_version: str = field(init=False)
    gedcom_form: str = field(init=False)
    charset: str = field(init=False)
    submitter: Optional[Dict[str, str]] = field(init=False)

    # Output
    max_line_length: int = field(init=False)
    ancestry_format: bool = field(init=False)

    # Input
    input_encoding: str = field(init=False)
    state_abbreviations: Dict[str, str] = field(init=False)

    def __post_init__(self):
        """Load configuration from the packaged YAML file."""
        self._apply(load_default_config(), DEFAULT_CONFIG_PATH)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> ConverterConfig:
        """
        Load configuration from a specific YAML file, over the packaged defaults.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            ConverterConfig: Configuration instance.
        """
        yaml_path = Path(yaml_path) if yaml_path else None
        if not yaml_path or not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")
        return cls.from_dict(config_dict, yaml_path)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any], yaml_path: Optional[Path] = None) -> ConverterConfig:
        """
        Create configuration from a dictionary, over the packaged defaults.

        Args:
            config_dict (Dict[str, Any]): Dictionary with configuration values.
            yaml_path: File the values came from, for error messages.

        Returns:
            ConverterConfig: Configuration instance.

        Raises:
            ValueError: If a key is unknown or a value is invalid.
        """
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration in {yaml_path or 'dictionary'} must be a mapping")
        instance = cls()
        instance._apply(config_dict, yaml_path)
        return instance

    def _apply(self, config_dict: Dict[str, Any], yaml_path: Optional[Path]) -> None:
        source = yaml_path or 'dictionary'
        unknown = sorted(set(config_dict) - set(self.__dataclass_fields__))
        if unknown:
            raise ValueError(f"Unknown configuration field(s) {', '.join(unknown)} in {source}")
        for key, value in config_dict.items():
            object.__setattr__(self, key, value)
        missing = [key for key in self.__dataclass_fields__ if not hasattr(self, key)]
        if missing:
            raise ValueError(f"Required configuration field(s) {', '.join(missing)} not found in {source}")
        self._validate(source)

    def _validate(self, source) -> None:
        if self.charset not in ('UTF-8', 'ASCII'):
            raise ValueError(f"charset must be UTF-8 or ASCII, got '{self.charset}' in {source}")
        if not isinstance(self.max_line_length, int) or self.max_line_length < 40:
            raise ValueError(f"max_line_length must be an integer of at least 40 in {source}")
        for key in ('id', 'name', 'version'):
            if not (self.source_system or {}).get(key):
                raise ValueError(f"source_system.{key} is required in {source}")
        if self.submitter is not None:
            if not self.submitter.get('id') or not self.submitter.get('name'):
                raise ValueError(f"submitter needs an id and a name in {source}")
        self.ancestry_format = bool(self.ancestry_format)
        self.state_abbreviations = {str(k).upper(): v for k, v in (self.state_abbreviations or {}).items()}

    @property
    def submitter_pointer(self) -> Optional[str]:
        return f"@{self.submitter['id']}@" if self.submitter else None
