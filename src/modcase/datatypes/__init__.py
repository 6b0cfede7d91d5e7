"""
Plain data types shared across Modcase.

- **discord_datatypes.py**: Type-safe snowflake wrappers (UserID, GuildID).
- **action_datatypes.py**: Action and note enums plus the request/record dataclasses
  flowing through the kick workflow.
- **outcome_datatypes.py**: Tagged outcome values produced by each workflow step.
"""
