"""
Configuration loader for the PDF Reader Server.

Loads settings from an optional config.json and provides typed access via
dataclasses. The PDF_PATH environment variable overrides the document path.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


PDF_PATH_ENV = "PDF_PATH"
DEFAULT_PDF_PATH = "pdf/document.pdf"


@dataclass
class DocumentConfig:
    """Configuration for the served document."""
    pdf_path: Path


@dataclass
class ExtractionConfig:
    """Configuration for PDF extraction settings."""
    primary_backend: str
    fallback_backend: Optional[str]


@dataclass
class QueryConfig:
    """Configuration for query behavior."""
    context_radius: int
    default_excerpt_length: int


@dataclass
class ServerConfig:
    """Configuration for the MCP server identity and error reporting."""
    name: str
    version: str
    resource_uri: str
    structured_errors: bool


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    logs_directory: Optional[Path]
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    document: DocumentConfig
    extraction: ExtractionConfig
    query: QueryConfig
    server: ServerConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read config file {config_path}: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.resolve().parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls, project_root: Path = None) -> "Config":
        """Build a configuration from built-in defaults only."""
        return cls._parse_config({}, Path(project_root or Path.cwd()))

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        doc_data = _section(data, "document")
        document = DocumentConfig(
            pdf_path=cls._resolve_path(
                _setting(doc_data, "document", "pdf_path", DEFAULT_PDF_PATH, str),
                project_root
            )
        )

        ext_data = _section(data, "extraction")
        extraction = ExtractionConfig(
            primary_backend=_setting(ext_data, "extraction", "primary_backend", "pypdf", str),
            fallback_backend=_setting(
                ext_data, "extraction", "fallback_backend", "pdfplumber", str, nullable=True
            )
        )

        query_data = _section(data, "query")
        query = QueryConfig(
            context_radius=_setting(query_data, "query", "context_radius", 50, int),
            default_excerpt_length=_setting(query_data, "query", "default_excerpt_length", 1000, int)
        )

        if query.context_radius < 0 or query.default_excerpt_length < 1:
            raise ConfigurationError(
                "Query settings out of range",
                {
                    "context_radius": query.context_radius,
                    "default_excerpt_length": query.default_excerpt_length
                }
            )

        server_data = _section(data, "server")
        server = ServerConfig(
            name=_setting(server_data, "server", "name", "pdf-reader-server", str),
            version=_setting(server_data, "server", "version", "1.0.0", str),
            resource_uri=_setting(server_data, "server", "resource_uri", "pdf://document", str),
            structured_errors=_setting(server_data, "server", "structured_errors", False, bool)
        )

        log_data = _section(data, "logging")
        logs_directory = _setting(log_data, "logging", "logs_directory", None, str, nullable=True)
        logging_cfg = LoggingConfig(
            level=_setting(log_data, "logging", "level", "INFO", str),
            format=_setting(
                log_data, "logging", "format",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", str
            ),
            logs_directory=cls._resolve_path(logs_directory, project_root) if logs_directory else None,
            max_file_size_mb=_setting(log_data, "logging", "max_file_size_mb", 10, int),
            backup_count=_setting(log_data, "logging", "backup_count", 5, int)
        )

        return cls(
            document=document,
            extraction=extraction,
            query=query,
            server=server,
            logging=logging_cfg,
            project_root=project_root
        )

    def apply_env_overrides(self, environ: dict = None) -> "Config":
        """
        Apply environment variable overrides in place.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            The same Config instance.
        """
        environ = os.environ if environ is None else environ

        pdf_path = environ.get(PDF_PATH_ENV)
        if pdf_path:
            self.document.pdf_path = Path(pdf_path).expanduser()

        return self

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


def _section(data: dict, name: str) -> dict:
    """Return a config section, which must be a JSON object when present."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Config section '{name}' must be an object",
            {"section": name}
        )
    return section


def _setting(section: dict, section_name: str, key: str, default, expected: type, nullable: bool = False):
    """
    Read one setting and check its JSON type.

    Args:
        section: Parsed config section.
        section_name: Section name, for error messages.
        key: Setting name.
        default: Value used when the key is absent.
        expected: Required Python type (str, int or bool).
        nullable: Whether an explicit null is allowed.

    Returns:
        The setting value.

    Raises:
        ConfigurationError: If the value has the wrong type.
    """
    value = section.get(key, default)

    if value is None and nullable:
        return None

    # bool is a subclass of int
    if isinstance(value, bool) and expected is not bool:
        valid = False
    else:
        valid = isinstance(value, expected)

    if not valid:
        raise ConfigurationError(
            f"Config setting '{section_name}.{key}' must be of type {expected.__name__}, "
            f"got {type(value).__name__}",
            {"setting": f"{section_name}.{key}", "value": value}
        )

    return value


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory and falls
                    back to built-in defaults when none is found.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If a config file exists but cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()

        if config_path is None:
            config = Config.defaults()
        else:
            config = Config.from_file(config_path)

        _config_instance = config.apply_env_overrides()

    return _config_instance


def _find_config_file() -> Optional[Path]:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"PDF path: {config.document.pdf_path}")
        print(f"Primary backend: {config.extraction.primary_backend}")
        print(f"Resource URI: {config.server.resource_uri}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
