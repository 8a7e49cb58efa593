"""Errors raised by the hosted screening service integration.

Screening is advisory, so these are not domain errors: callers decide how a
failed check affects the action in progress.
"""


class AIServiceError(Exception):
    """The screening service could not produce a usable answer."""


class AIServiceUnavailableError(AIServiceError):
    """The screening service is not configured."""
