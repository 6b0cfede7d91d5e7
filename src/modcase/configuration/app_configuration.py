from __future__ import annotations
from pathlib import Path
import fcntl
from typing import Any, Dict, Optional
import yaml

from modcase.util.logger import get_logger

logger = get_logger("app_configuration")


# Relative to the project home
CONFIG_PATH = Path("config/app_config.yml")

DEFAULT_COMMAND_PREFIX = "!"
DEFAULT_DATABASE_PATH = Path("./data/modcase.db")
DEFAULT_PERMISSION_NOTICE_DELETE_AFTER = 60.0


class AppConfig:
    """File-lock based accessor around the YAML-based application configuration.

    The class caches contents of ``./config/app_config.yml`` and exposes dictionary-like
    access helpers plus typed shortcuts for the settings the bot reads.
    Uses fcntl file locks for safe concurrent access across processes.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._data: Dict[str, Any] = {}
        self.reload()

    # --------------------------
    # Private helpers
    # --------------------------
    def load_from_disk(self) -> Dict[str, Any]:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    data = yaml.safe_load(f)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except FileNotFoundError:
            logger.error("[APP CONFIGURATION] Config file %s not found.", self.config_path)
            return {}
        except Exception as exc:
            logger.error("[APP CONFIGURATION] Failed to load config %s: %s", self.config_path, exc)
            return {}

        if not isinstance(data, dict):
            if data is not None:
                logger.error("[APP CONFIGURATION] Config %s is not a mapping, ignoring it.", self.config_path)
            return {}
        return data

    def section(self, key: str) -> Dict[str, Any]:
        value = self._data.get(key, {})
        return value if isinstance(value, dict) else {}

    # --------------------------
    # Public API
    # --------------------------
    def reload(self) -> Dict[str, Any]:
        """Reload configuration from disk and return the loaded mapping.

        Returns the raw mapping that was loaded (which will be an empty dict on error).
        """
        self._data = self.load_from_disk()
        return self._data

    @property
    def data(self) -> Dict[str, Any]:
        """Return the current cached configuration mapping.

        The returned dict is the internal cache (shallow reference). Callers
        should not mutate it.
        """
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Safe lookup for top-level configuration keys."""
        return self._data.get(key, default)

    # --------------------------
    # High-level shortcuts
    # --------------------------
    @property
    def command_prefix(self) -> str:
        """Return the prefix text commands are invoked with (default ``!``)."""
        value = self.section("bot").get("command_prefix")
        return str(value) if value else DEFAULT_COMMAND_PREFIX

    @property
    def database_path(self) -> Path:
        """Return the resolved path of the SQLite database file."""
        value = self.section("database").get("path")
        return Path(value).resolve() if value else DEFAULT_DATABASE_PATH.resolve()

    @property
    def permission_notice_delete_after(self) -> float:
        """Seconds after which the "missing kick permission" notice is deleted.

        Default is 60 seconds.
        """
        value = self.section("moderation").get("permission_notice_delete_after_seconds")
        try:
            return float(value) if value is not None else DEFAULT_PERMISSION_NOTICE_DELETE_AFTER
        except (TypeError, ValueError):
            logger.warning("[APP CONFIGURATION] Invalid permission notice delay %r, using default", value)
            return DEFAULT_PERMISSION_NOTICE_DELETE_AFTER

    def log_channel_id(self, guild_id: int) -> Optional[int]:
        """Return the audit log channel configured for ``guild_id``, if any.

        Keys of the ``guild_log_channels`` mapping may be written as ints or strings.
        """
        channels = self.section("guild_log_channels")
        value = channels.get(guild_id, channels.get(str(guild_id)))
        try:
            return int(value) if value is not None else None
        except (TypeError, ValueError):
            logger.warning("[APP CONFIGURATION] Invalid log channel %r for guild %s", value, guild_id)
            return None

