"""
Configuration management for the messages wrapper generator.

Builder options are read from the project's build.yaml, under
``targets.$default.builders.messages_wrapper.options``. A missing or
malformed file never fails a build: every option falls back to its default.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
from enum import Enum
import yaml

from .errors import ConfigurationUnavailable
from ..utils.logger import get_logger

logger = get_logger(__name__)


CONFIG_FILE_NAME = "build.yaml"
BUILDER_KEY = "messages_wrapper"
DEFAULT_TARGET = "$default"

DEFAULT_HEADER = "Generated by the wrapper generator"
DEFAULT_CLASS_NAME = "Messages"


class NamingStrategy(Enum):
    """How the messages class name is obtained."""
    DECLARATION = "declaration"  # Scan the catalogue for `class <Prefix>Messages {`
    CONFIG = "config"            # Use the configured class_name


@dataclass
class WrapperOptions:
    """Options controlling the generated wrapper library."""
    header: str = DEFAULT_HEADER
    class_name: str = DEFAULT_CLASS_NAME
    naming: NamingStrategy = NamingStrategy.DECLARATION
    extension: bool = True
    private_delegate: bool = False

    def __post_init__(self):
        if isinstance(self.naming, str):
            self.naming = NamingStrategy(self.naming)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WrapperOptions':
        """
        Create options from a builder options mapping.

        Options with the wrong type or an unknown value are logged and
        replaced by their defaults; unknown keys are ignored.

        Args:
            data: The `options` mapping from build.yaml

        Returns:
            WrapperOptions instance
        """
        defaults = cls()

        header = _option(data, 'header', str, defaults.header)
        if not header.strip():
            logger.warning("Option 'header' is empty, using default")
            header = defaults.header

        class_name = _option(data, 'class_name', str, defaults.class_name).strip()
        if not class_name:
            logger.warning("Option 'class_name' is empty, using default")
            class_name = defaults.class_name

        naming_value = _option(data, 'naming', str, defaults.naming.value)
        try:
            naming = NamingStrategy(naming_value.strip().lower())
        except ValueError:
            logger.warning(
                f"Unknown naming strategy '{naming_value}', "
                f"expected one of {[s.value for s in NamingStrategy]}"
            )
            naming = defaults.naming

        return cls(
            header=header,
            class_name=class_name,
            naming=naming,
            extension=_option(data, 'extension', bool, defaults.extension),
            private_delegate=_option(data, 'private_delegate', bool, defaults.private_delegate),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'header': self.header,
            'class_name': self.class_name,
            'naming': self.naming.value,
            'extension': self.extension,
            'private_delegate': self.private_delegate,
        }


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be resolved from a build.yaml or constructed programmatically.
    """
    wrapper: WrapperOptions = field(default_factory=WrapperOptions)
    source: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Mapping with an optional 'wrapper' section

        Returns:
            AppConfig instance
        """
        return cls(
            wrapper=WrapperOptions.from_dict(data.get('wrapper') or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'wrapper': self.wrapper.to_dict(),
            'source': str(self.source) if self.source else None,
        }

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)


class ConfigResolver:
    """
    Resolves WrapperOptions from a build.yaml file.

    The resolver never raises: configuration problems are reported as
    warnings and the defaults are used instead.
    """

    def __init__(
        self,
        config_path: Optional[Path | str] = None,
        builder_key: str = BUILDER_KEY,
    ):
        """
        Initialize the resolver.

        Args:
            config_path: Path to build.yaml (None means no configuration)
            builder_key: Builder entry to read options from
        """
        self.config_path = Path(config_path) if config_path else None
        self.builder_key = builder_key

    def resolve(self) -> WrapperOptions:
        """
        Resolve builder options.

        Returns:
            WrapperOptions, defaults where the configuration is silent
        """
        try:
            options = self.load_options()
        except ConfigurationUnavailable as e:
            logger.warning(f"{e}; using default options")
            return WrapperOptions()

        return WrapperOptions.from_dict(options)

    def resolve_app_config(self) -> AppConfig:
        """Resolve options into a full AppConfig."""
        return AppConfig(wrapper=self.resolve(), source=self.config_path)

    def load_options(self) -> Dict[str, Any]:
        """
        Read the raw options mapping for this builder.

        Returns:
            Options mapping (empty when the builder has no entry)

        Raises:
            ConfigurationUnavailable: If the file is missing, unreadable or malformed
        """
        path = self.config_path
        if path is None or not path.is_file():
            raise ConfigurationUnavailable(path, "file not found")

        try:
            data = yaml.safe_load(path.read_text(encoding='utf-8'))
        except OSError as e:
            raise ConfigurationUnavailable(path, f"cannot read file: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationUnavailable(path, f"cannot decode file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationUnavailable(path, f"invalid YAML: {e}") from e

        if data is None:
            return {}

        node: Any = data
        for key in ('targets', DEFAULT_TARGET, 'builders', self.builder_key, 'options'):
            if not isinstance(node, dict):
                raise ConfigurationUnavailable(path, f"expected a mapping above '{key}'")
            node = node.get(key)
            if node is None:
                logger.debug(f"No '{key}' entry in {path}")
                return {}

        if not isinstance(node, dict):
            raise ConfigurationUnavailable(path, "builder options must be a mapping")

        return node


def _option(data: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
    """Fetch an option, falling back to default on absence or wrong type."""
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, expected):
        logger.warning(
            f"Option '{key}' should be {expected.__name__}, "
            f"got {type(value).__name__}; using default"
        )
        return default
    return value


def find_config(project_root: Path | str) -> Optional[Path]:
    """
    Locate the build.yaml for a project.

    Args:
        project_root: Directory to look in

    Returns:
        Path to build.yaml, or None if the project has none
    """
    candidate = Path(project_root) / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None
