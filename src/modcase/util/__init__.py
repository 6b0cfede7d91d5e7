"""
Utility functions and helpers for Modcase.

- **logger.py**: Centralized logging configuration with colored console output,
  per-session log files, and noise suppression for Discord internals. Uses
  prompt_toolkit so log output does not tear through an attached terminal prompt.

- **format_utils.py**: Display helpers for members and timestamps used in embeds and
  replies.
"""
