# Load key/value pairs from a text file into the process environment.
from env_plus.environment import EnvironmentStore, MappingEnvironment, OsEnvironment
from env_plus.errors import (
    ConfigError,
    EnvPlusError,
    FileReadError,
    LoadError,
    MalformedLineError,
)
from env_plus.loader import EnvLoader, activate, load_env_file
from env_plus.parser import parse_content, parse_line
from env_plus.schemas import (
    DEFAULT_COMMENT,
    DEFAULT_DELIMITER,
    DEFAULT_FILE,
    Entry,
    LoadReport,
    LoaderConfig,
)

__all__ = [
    "ConfigError",
    "DEFAULT_COMMENT",
    "DEFAULT_DELIMITER",
    "DEFAULT_FILE",
    "EnvLoader",
    "EnvPlusError",
    "EnvironmentStore",
    "Entry",
    "FileReadError",
    "LoadError",
    "LoadReport",
    "LoaderConfig",
    "MalformedLineError",
    "MappingEnvironment",
    "OsEnvironment",
    "activate",
    "load_env_file",
    "parse_content",
    "parse_line",
]
