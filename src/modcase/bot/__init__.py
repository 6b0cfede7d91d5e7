"""
Discord bot cogs for Modcase.

- **moderation_cmds.py**: The ``kick`` and ``notes`` text commands
- **help_cmds.py**: The ``help`` command listing every registered command
- **events_listener.py**: Bot lifecycle logging and command error handling
"""
