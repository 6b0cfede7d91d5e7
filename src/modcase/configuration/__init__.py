"""
Configuration management for Modcase.

- **app_configuration.py**: File-locked YAML configuration loader for global settings:
  command prefix, database location, the lifetime of auto-deleted moderator notices,
  and the audit log channel of each guild. Falls back gracefully on missing or
  malformed config files.
"""
