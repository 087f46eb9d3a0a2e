"""
Session property rules for the query coordinator.

This package decides which session property overrides apply to an
incoming query session. It provides:

- app.rules: Match rule model, session context, coordinator version and
  the JSON rule loader.

Guidelines:
- Rules are immutable once built; evaluation holds no state.
- Keep rule evaluation deterministic and observable (metrics + logs).
- Deciding between several matching rules belongs to the caller.
"""
