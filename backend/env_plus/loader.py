# Builder for loader settings and the activation that applies an env file.
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from env_plus.environment import EnvironmentLike, resolve_store
from env_plus.errors import ConfigError, FileReadError
from env_plus.parser import parse_content
from env_plus.schemas import LoadReport, LoaderConfig

logger = logging.getLogger("env_plus")

PathLike = Union[str, "os.PathLike[str]"]


# Chainable builder for a LoaderConfig; each change_* call returns a new loader.
class EnvLoader:
    def __init__(self, **overrides: Any):
        self._overrides: Dict[str, Any] = dict(overrides)

    def _with(self, **changes: Any) -> "EnvLoader":
        return type(self)(**{**self._overrides, **changes})

    def change_file(self, path: PathLike) -> "EnvLoader":
        return self._with(file=os.fspath(path))

    def change_comment(self, comment: str) -> "EnvLoader":
        return self._with(comment=comment)

    def change_delimiter(self, delimiter: str) -> "EnvLoader":
        return self._with(delimiter=delimiter)

    def overwrite_envs(self, overwrite: bool) -> "EnvLoader":
        return self._with(overwrite=overwrite)

    def strict_mode(self, strict: bool = True) -> "EnvLoader":
        return self._with(strict=strict)

    def strip_inline_comments(self, enabled: bool = True) -> "EnvLoader":
        return self._with(inline_comments=enabled)

    def build(self) -> LoaderConfig:
        try:
            return LoaderConfig(**self._overrides)
        except ValidationError as exc:
            raise ConfigError(_describe_validation_error(exc)) from exc

    @property
    def config(self) -> LoaderConfig:
        return self.build()

    def activate(self, environ: EnvironmentLike = None) -> LoadReport:
        return activate(self.build(), environ)

    def __repr__(self) -> str:
        return f"EnvLoader({self._overrides!r})"


# Flatten pydantic errors into a single readable message.
def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "invalid loader configuration: " + "; ".join(messages)


# Read the whole file as UTF-8 text, wrapping any failure in FileReadError.
def read_env_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Unable to read env file %r: %s", path, exc)
        raise FileReadError(path, str(exc)) from exc


# Read, parse and apply the configured file to the target environment.
# Nothing is written until the whole file has been read and parsed.
def activate(config: LoaderConfig, environ: EnvironmentLike = None) -> LoadReport:
    store = resolve_store(environ)
    content = read_env_file(config.file)
    entries, skipped = parse_content(content, config)

    report = LoadReport(skipped_lines=skipped)
    for entry in entries:
        if store.get(entry.key) is not None and not config.overwrite:
            report.kept.append(entry.key)
            continue
        store.set(entry.key, entry.value)
        report.applied[entry.key] = entry.value

    logger.info(
        "Loaded %s: %d applied, %d kept, %d skipped",
        config.file,
        len(report.applied),
        len(report.kept),
        len(report.skipped_lines),
    )
    return report


# Load a dotenv-style file (`#` comments, `=` delimiter) and return the
# values that were set. A missing file is not an error here.
def load_env_file(
    path: PathLike, overwrite: bool = False, environ: EnvironmentLike = None
) -> Dict[str, str]:
    if not Path(path).exists():
        return {}
    loader = EnvLoader().change_file(path).change_comment("#").overwrite_envs(overwrite)
    return loader.activate(environ).applied
