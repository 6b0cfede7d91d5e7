"""
The kick workflow.

Each step of a kick lives in its own module and returns a tagged outcome:

- **target_resolver.py**: Turns the raw invocation into a ModerationRequest
- **authorization_gate.py**: Guild context, kick capability and role hierarchy checks
- **notification_step.py**: DMs the kick notice to the target before the kick
- **action_executor.py**: Performs the kick
- **outcome_reporter.py**: Picks the moderator reply and side effects from the
  (notification, action) outcome pair
- **audit_recorder.py**: Writes the audit case and the moderation note
- **kick_workflow.py**: Orchestrates the steps above for one invocation
- **platform.py**: The chat-platform calls the workflow depends on, and their
  py-cord implementation
"""
