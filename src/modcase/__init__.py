"""
Modcase - Discord moderation bot with logged kick cases

Modcase gives server moderators a ``kick`` command that explains the kick to the
member before it happens, records a numbered audit case for every applied kick, and
keeps moderation notes on members who were demonstrably informed.

Core Components:

- **Kick Workflow**: Resolves the target, checks the moderator's authority, notifies the
  member, kicks, and reports the outcome back to the moderator over DM
- **Audit Cases**: Per-guild monotonically numbered case log stored in SQLite and
  rendered to the guild's log channel
- **Moderation Notes**: Warn notes attached to members, viewable with ``notes``

Usage:
    from modcase.main import main
    main()  # Starts the bot
"""
