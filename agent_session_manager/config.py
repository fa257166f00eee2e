"""
Agent Session Manager configuration handling.

Provides YAML configuration loading and saving. Environment overrides are
resolved once, when a store is built, never mid-operation.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

DATA_DIR_ENV = "CLAUDE_DATA_DIR"
CONFIG_DIR_ENV = "AGENT_CONFIG_DIR"

DEFAULT_EXPORT_PATH = "~/claude-exports"
DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def default_config_dir() -> Path:
    """Directory holding config.yaml: $AGENT_CONFIG_DIR or ~/.config/agent-session-manager."""
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".config" / "agent-session-manager"


def default_data_dir() -> Path:
    """Claude data root: $CLAUDE_DATA_DIR or ~/.claude."""
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".claude"


def _expand(path: str) -> Path:
    return Path(path).expanduser()


@dataclass
class ManagerConfig:
    """
    Agent Session Manager configuration.

    Can be loaded from a YAML file or created programmatically.
    """
    data_dir: str = ""  # empty = $CLAUDE_DATA_DIR or ~/.claude
    export_path: str = DEFAULT_EXPORT_PATH

    # Loader
    load_workers: int = 0  # 0 = ThreadPoolExecutor default

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""
    log_format: str = DEFAULT_LOG_FORMAT
    log_max_bytes: int = 10485760  # 10MB
    log_backup_count: int = 3

    @classmethod
    def load(cls, path: str) -> "ManagerConfig":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            ManagerConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file is invalid YAML
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ManagerConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            ManagerConfig instance
        """
        loader_cfg = data.get("loader", {}) or {}
        logging_cfg = data.get("logging", {}) or {}

        return cls(
            data_dir=str(data.get("data_dir", "") or ""),
            export_path=str(data.get("export_path", DEFAULT_EXPORT_PATH) or DEFAULT_EXPORT_PATH),
            load_workers=int(loader_cfg.get("workers", 0) or 0),
            log_level=logging_cfg.get("level", "WARNING"),
            log_file=logging_cfg.get("file", ""),
            log_format=logging_cfg.get("format", DEFAULT_LOG_FORMAT),
            log_max_bytes=logging_cfg.get("max_bytes", 10485760),
            log_backup_count=logging_cfg.get("backup_count", 3),
        )

    def resolved_data_dir(self) -> Path:
        """
        Get the Claude data root holding projects/ and trash/.

        An explicit data_dir wins; otherwise $CLAUDE_DATA_DIR, then ~/.claude.
        """
        if self.data_dir:
            return _expand(self.data_dir)
        return default_data_dir()

    def resolved_export_path(self) -> Path:
        """Get the export directory with ``~`` expanded."""
        return _expand(self.export_path or DEFAULT_EXPORT_PATH)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            "data_dir": self.data_dir,
            "export_path": self.export_path,
            "loader": {
                "workers": self.load_workers,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
                "format": self.log_format,
                "max_bytes": self.log_max_bytes,
                "backup_count": self.log_backup_count,
            },
        }

    def save(self, path: str) -> None:
        """
        Save configuration to a YAML file, creating parent directories.

        Args:
            path: Path to save the configuration file
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)
