"""
Configuration manager for loading and saving settings from YAML/JSON files.
"""
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict
import os
from dotenv import load_dotenv

from ..core.exceptions import InvalidConfigError
from ..core.models import INDEX_FILENAME, INDEX_TITLE, PAGE_SUFFIX


@dataclass
class InputConfig:
    """Configuration for reading glossary input."""
    encoding: str = "utf-8"


@dataclass
class RenderConfig:
    """Configuration for page rendering."""
    index_title: str = INDEX_TITLE
    index_filename: str = INDEX_FILENAME
    page_suffix: str = PAGE_SUFFIX
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    console_level: str = "WARNING"
    max_bytes: int = 10_000_000
    backup_count: int = 5
    use_colors: bool = True
    log_to_file: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    input: InputConfig = field(default_factory=InputConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Paths
    output_dir: str = "output"


_SECTIONS = {
    'input': InputConfig,
    'render': RenderConfig,
    'logging': LoggingConfig,
}


class ConfigManager:
    """
    Configuration manager for loading/saving application settings.
    Supports YAML and JSON formats, environment variables, and defaults.
    """

    def __init__(self, config_path: Optional[Path] = None, create_if_missing: bool = False):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (YAML or JSON); defaults only if None
            create_if_missing: Write a default config when the file does not exist
        """
        self.config_path = Path(config_path) if config_path else None
        self.config: AppConfig = AppConfig()

        # Load environment variables
        load_dotenv()

        if self.config_path and self.config_path.exists():
            self.load()
        else:
            if self.config_path and create_if_missing:
                self.save()
            self._apply_env_vars()

    def load(self) -> AppConfig:
        """
        Load configuration from file.

        Returns:
            AppConfig instance

        Raises:
            InvalidConfigError: If the format or contents are invalid
        """
        if not self.config_path or not self.config_path.exists():
            return self.config

        # Determine format by extension
        if self.config_path.suffix in ['.yaml', '.yml']:
            data = self._load_yaml()
        elif self.config_path.suffix == '.json':
            data = self._load_json()
        else:
            raise InvalidConfigError(
                f"Unsupported config format: {self.config_path.suffix}",
                field="config_path"
            )

        if not isinstance(data, dict):
            raise InvalidConfigError("Config root must be a mapping", field="config_path")

        # Parse config
        self.config = self._parse_config(data)

        # Override with environment variables
        self._apply_env_vars()

        return self.config

    def save(self, config: Optional[AppConfig] = None):
        """
        Save configuration to file.

        Args:
            config: Config to save (uses current if None)
        """
        if config:
            self.config = config

        if not self.config_path:
            raise InvalidConfigError("No config path to save to", field="config_path")

        # Convert to dict
        data = self._config_to_dict(self.config)

        # Create parent directory
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        # Save based on format
        if self.config_path.suffix in ['.yaml', '.yml']:
            self._save_yaml(data)
        elif self.config_path.suffix == '.json':
            self._save_json(data)
        else:
            raise InvalidConfigError(
                f"Unsupported config format: {self.config_path.suffix}",
                field="config_path"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot notation key.

        Args:
            key: Configuration key (e.g., 'render.index_title')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        parts = key.split('.')
        value = self.config

        for part in parts:
            if hasattr(value, part):
                value = getattr(value, part)
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot notation key.

        Args:
            key: Configuration key
            value: Value to set
        """
        parts = key.split('.')
        obj = self.config

        # Navigate to parent
        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise KeyError(f"Invalid config key: {key}")

        if not hasattr(obj, parts[-1]):
            raise KeyError(f"Invalid config key: {key}")

        setattr(obj, parts[-1], value)

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML config file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigError(f"Invalid YAML: {e}", field="config_path") from e

    def _load_json(self) -> Dict[str, Any]:
        """Load JSON config file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"Invalid JSON: {e}", field="config_path") from e

    def _save_yaml(self, data: Dict[str, Any]):
        """Save config as YAML."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

    def _save_json(self, data: Dict[str, Any]):
        """Save config as JSON."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _parse_config(self, data: Dict[str, Any]) -> AppConfig:
        """Parse dictionary to AppConfig."""
        config = AppConfig()

        for name, section_class in _SECTIONS.items():
            if name in data:
                try:
                    setattr(config, name, section_class(**(data[name] or {})))
                except TypeError as e:
                    raise InvalidConfigError(
                        f"Invalid '{name}' section: {e}",
                        field=name
                    ) from e

        if 'output_dir' in data:
            config.output_dir = str(data['output_dir'])

        return config

    def _config_to_dict(self, config: AppConfig) -> Dict[str, Any]:
        """Convert AppConfig to dictionary."""
        return {
            'input': asdict(config.input),
            'render': asdict(config.render),
            'logging': asdict(config.logging),
            'output_dir': config.output_dir
        }

    def _apply_env_vars(self):
        """Override config with environment variables."""
        if os.getenv('GLOSSARY_OUTPUT_DIR'):
            self.config.output_dir = os.getenv('GLOSSARY_OUTPUT_DIR')

        if os.getenv('GLOSSARY_INPUT_ENCODING'):
            self.config.input.encoding = os.getenv('GLOSSARY_INPUT_ENCODING')

        # Logging
        if os.getenv('LOG_LEVEL'):
            self.config.logging.log_level = os.getenv('LOG_LEVEL')
            self.config.logging.console_level = os.getenv('LOG_LEVEL')

    def export_template(self, output_path: Path):
        """
        Export configuration template with comments.

        Args:
            output_path: Path to save template
        """
        template = """# Glossary Site Generator Configuration

# Input Settings
input:
  encoding: utf-8           # Encoding of the glossary text file

# Page Rendering Settings
render:
  index_title: Glossary     # Title and heading of the index page
  index_filename: index.html
  page_suffix: .html        # Appended to each term to name its page
  encoding: utf-8           # Encoding of generated pages

# Logging Settings
logging:
  log_dir: logs             # Log directory
  log_level: INFO           # File log level
  console_level: WARNING    # Console output level
  max_bytes: 10000000       # Max log file size (10MB)
  backup_count: 5           # Number of backup files
  use_colors: true          # Colored console output
  log_to_file: true         # Write a rotating log file

# General Settings
output_dir: output          # Default folder for generated pages
"""

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(template)
