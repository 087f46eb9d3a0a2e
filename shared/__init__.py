"""
Shared utilities for the session property rules.

This package aggregates common building blocks consumed by the rule
packages:

- config: Settings via pydantic-settings
- logging: Structured logging with structlog
- metrics: Prometheus counters for rule evaluations
- errors: Canonical error types and responses

Do not import from service_* packages into shared/.
"""
