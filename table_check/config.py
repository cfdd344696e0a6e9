"""Configuration loading and validation.

Usage:
    config = load()                          # defaults if table-check.yaml is absent
    config = load("ci/table-check.yaml")     # raises ConfigError if missing or bad
    rules  = config.rules()                  # Rules for the checks
    generate_template("table-check.yaml")    # writes example file to disk
"""

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from table_check.discovery import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS
from table_check.models import Rules

DEFAULT_CONFIG_PATH = "table-check.yaml"
DEFAULT_ROOT        = "/workspace"
FAIL_ON_CHOICES     = ("never", "error", "warning")

_KNOWN_KEYS = {"root", "extensions", "exclude_dirs", "components", "fail_on"}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


class InvalidValueError(ConfigError):
    """Raised when a configuration key holds a value of the wrong shape."""


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass
class Config:
    root: str = DEFAULT_ROOT
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    components: list[str] = field(default_factory=lambda: list(Rules().components))
    fail_on: str = "never"

    def rules(self) -> Rules:
        return Rules(components=tuple(self.components))

    def should_fail(self, errors: int, warning_count: int) -> bool:
        """Whether the scan result should produce a non-zero exit status."""
        if self.fail_on == "error":
            return errors > 0
        if self.fail_on == "warning":
            return errors + warning_count > 0
        return False


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load(config_path: str | None = None) -> Config:
    """Load and validate configuration from a YAML file.

    With no *config_path*, ``table-check.yaml`` in the working directory is
    used when present and built-in defaults otherwise. The environment
    variable TABLE_CHECK_ROOT overrides ``root``.

    Raises:
        ConfigError: if an explicit file is missing, the file is malformed,
                     or a value is invalid.
    """
    explicit = config_path is not None
    path = Path(config_path or DEFAULT_CONFIG_PATH)

    if path.exists():
        raw = _read(path)
    elif explicit:
        raise ConfigError(
            f"Config file not found: '{path}'\n"
            "Run `python -m table_check init` to generate a template."
        )
    else:
        raw = {}

    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        warnings.warn(
            f"Ignoring unknown configuration keys in '{path}': {', '.join(unknown)}",
            UserWarning,
            stacklevel=2,
        )

    defaults = Config()
    config = Config(
        root=os.environ.get("TABLE_CHECK_ROOT") or raw.get("root") or defaults.root,
        extensions=raw.get("extensions", defaults.extensions),
        exclude_dirs=raw.get("exclude_dirs", defaults.exclude_dirs),
        components=raw.get("components", defaults.components),
        fail_on=raw.get("fail_on", defaults.fail_on),
    )
    _validate(config)
    return config


def _read(path: Path) -> dict:
    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse '{path}': {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'{path}' must be a YAML mapping at the top level.")
    return raw


def _validate(config: Config) -> None:
    """Raise InvalidValueError listing every bad value."""
    errors: list[str] = []

    if not isinstance(config.root, str) or not config.root.strip():
        errors.append("  - 'root' must be a non-empty string")
    for key in ("extensions", "exclude_dirs", "components"):
        value = getattr(config, key)
        if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
            errors.append(f"  - '{key}' must be a list of non-empty strings")
    if not config.extensions:
        errors.append("  - 'extensions' is empty, add at least one file extension")
    if config.fail_on not in FAIL_ON_CHOICES:
        errors.append(
            f"  - 'fail_on' must be one of {', '.join(FAIL_ON_CHOICES)} (got {config.fail_on!r})"
        )

    if errors:
        raise InvalidValueError("Invalid configuration:\n" + "\n".join(errors))


# ---------------------------------------------------------------------------
# Template generator (used by `init` command)
# ---------------------------------------------------------------------------

TEMPLATE = """\
# Directory scanned when no ROOT argument is given (TABLE_CHECK_ROOT overrides it)
root: "/workspace"

extensions: [".vue"]
exclude_dirs: ["node_modules", ".git", ".idea", "dist"]

# Components reported when they read `row` inside el-table-column without a template
components:
  - dict-tag
  - el-tag
  - el-button
  - el-switch
  - el-link
  - el-input

# Exit with status 1 when issues at this level are found: never | error | warning
fail_on: "never"
"""


def generate_template(output_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Write a template table-check.yaml to *output_path*.

    Raises:
        ConfigError: if the file already exists.
    """
    path = Path(output_path)
    if path.exists():
        raise ConfigError(
            f"'{output_path}' already exists. Remove it first or choose a different path."
        )
    path.write_text(TEMPLATE, encoding="utf-8")
