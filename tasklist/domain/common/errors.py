from __future__ import annotations


class DomainError(Exception):
    """Base for errors raised by input parsing around the task list."""


class ValidationError(DomainError):
    pass
