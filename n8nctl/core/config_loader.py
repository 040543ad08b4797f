"""Configuration management for n8nctl deployments"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from n8nctl.constants import (
    CONFIG_OVERRIDE_FILE,
    DEFAULT_APP_DATA_PATH,
    DEFAULT_APP_SERVICE,
    DEFAULT_APP_URL,
    DEFAULT_BACKUP_DIR,
    DEFAULT_CERT_DIR,
    DEFAULT_COMPOSE_FILE,
    DEFAULT_DB_NAME,
    DEFAULT_DB_SERVICE,
    DEFAULT_DB_USER,
    DEFAULT_ENV_FILE,
    DEFAULT_ENV_TEMPLATE,
    DEFAULT_HEALTH_TARGETS,
    DEFAULT_LOG_TAIL,
    DEFAULT_WORKER_SERVICE,
    ENV_DIR_VARIABLE,
    HEALTH_PROBE_TIMEOUT,
    REQUIRED_CERTIFICATES,
)
from n8nctl.exceptions import ConfigurationError
from n8nctl.models.deployment import HealthTarget

PATH_KEYS = ("compose_file", "env_file", "env_template", "cert_dir", "backup_dir")
STRING_KEYS = (
    "app_service",
    "app_data_path",
    "worker_service",
    "db_service",
    "db_user",
    "db_name",
    "app_url",
)


@dataclass
class StackConfig:
    """
    Every path and name the lifecycle components need.

    Values are threaded into each component explicitly; nothing below
    relies on the process working directory.
    """

    root: Path
    compose_file: Path
    env_file: Path
    env_template: Path
    cert_dir: Path
    backup_dir: Path
    required_certificates: Tuple[str, ...] = REQUIRED_CERTIFICATES
    app_service: str = DEFAULT_APP_SERVICE
    app_data_path: str = DEFAULT_APP_DATA_PATH
    worker_service: str = DEFAULT_WORKER_SERVICE
    db_service: str = DEFAULT_DB_SERVICE
    db_user: str = DEFAULT_DB_USER
    db_name: str = DEFAULT_DB_NAME
    app_url: str = DEFAULT_APP_URL
    log_tail: int = DEFAULT_LOG_TAIL
    probe_timeout: float = HEALTH_PROBE_TIMEOUT
    health_targets: List[HealthTarget] = field(
        default_factory=lambda: [
            HealthTarget(name, url, verify) for name, url, verify in DEFAULT_HEALTH_TARGETS
        ]
    )

    @classmethod
    def defaults(cls, root: Path) -> "StackConfig":
        """Default layout rooted at the deployment directory."""
        return cls(
            root=root,
            compose_file=root / DEFAULT_COMPOSE_FILE,
            env_file=root / DEFAULT_ENV_FILE,
            env_template=root / DEFAULT_ENV_TEMPLATE,
            cert_dir=root / DEFAULT_CERT_DIR,
            backup_dir=root / DEFAULT_BACKUP_DIR,
        )

    def apply_overrides(self, overrides: Dict[str, Any], source: Path) -> None:
        """
        Apply values read from the override file.

        Args:
            overrides: Mapping loaded from n8nctl.yml
            source: File the mapping came from (for error context)

        Raises:
            ConfigurationError: On unknown keys or wrongly typed values
        """
        for key, value in overrides.items():
            if key in PATH_KEYS:
                setattr(self, key, self._resolve_path(self._require_str(key, value, source)))
            elif key in STRING_KEYS:
                setattr(self, key, self._require_str(key, value, source))
            elif key == "required_certificates":
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigurationError(
                        "required_certificates must be a list of file names",
                        context=str(source),
                    )
                self.required_certificates = tuple(value)
            elif key in ("log_tail", "probe_timeout"):
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                    raise ConfigurationError(
                        f"{key} must be a positive number", context=str(source)
                    )
                setattr(self, key, int(value) if key == "log_tail" else float(value))
            elif key == "health_targets":
                self.health_targets = self._parse_targets(value, source)
            else:
                raise ConfigurationError(f"Unknown setting '{key}'", context=str(source))

    def _resolve_path(self, value: str) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.root / path

    @staticmethod
    def _require_str(key: str, value: Any, source: Path) -> str:
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"{key} must be a non-empty string", context=str(source))
        return value

    @staticmethod
    def _parse_targets(value: Any, source: Path) -> List[HealthTarget]:
        if not isinstance(value, list):
            raise ConfigurationError("health_targets must be a list", context=str(source))

        targets = []
        for entry in value:
            if not isinstance(entry, dict) or "name" not in entry or "url" not in entry:
                raise ConfigurationError(
                    "Each health target needs 'name' and 'url'", context=str(source)
                )
            verify_tls = entry.get("verify_tls", True)
            if not isinstance(verify_tls, bool):
                raise ConfigurationError(
                    "verify_tls must be true or false", context=str(source)
                )
            targets.append(
                HealthTarget(
                    name=str(entry["name"]),
                    url=str(entry["url"]),
                    verify_tls=verify_tls,
                )
            )
        return targets


def resolve_root(directory: Optional[Path] = None) -> Path:
    """Deployment directory: explicit argument, then $N8NCTL_DIR, then cwd."""
    if directory is not None:
        return Path(directory).expanduser().resolve()
    env_dir = os.environ.get(ENV_DIR_VARIABLE)
    if env_dir:
        return Path(env_dir).expanduser().resolve()
    return Path.cwd().resolve()


def load_stack_config(directory: Optional[Path] = None) -> StackConfig:
    """
    Load the deployment configuration.

    Args:
        directory: Deployment directory (see resolve_root)

    Returns:
        StackConfig with defaults and any n8nctl.yml overrides applied

    Raises:
        ConfigurationError: If n8nctl.yml cannot be parsed or is invalid
    """
    root = resolve_root(directory)
    config = StackConfig.defaults(root)

    override_file = root / CONFIG_OVERRIDE_FILE
    if not override_file.exists():
        return config

    try:
        with open(override_file, "r") as f:
            overrides = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {CONFIG_OVERRIDE_FILE}", context=str(e))

    if overrides is None:
        return config
    if not isinstance(overrides, dict):
        raise ConfigurationError(
            f"{CONFIG_OVERRIDE_FILE} must contain a mapping", context=str(override_file)
        )

    config.apply_overrides(overrides, override_file)
    return config
