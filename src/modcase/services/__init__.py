"""
Persistence services consumed by the kick workflow.

- **audit_log_service.py**: Appends audit cases and allocates per-guild case numbers.
- **note_store_service.py**: Adds and lists moderation notes.
"""
