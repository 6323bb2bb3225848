"""Exception hierarchy for blueprint-ai."""


class BlueprintError(Exception):
    """Base exception for all blueprint-ai errors."""


class MissingInputError(BlueprintError):
    """Raised when a required request input is absent."""


class LLMClientError(BlueprintError):
    """Raised when LLM API calls fail after exhausting retries."""


class RetryableError(LLMClientError):
    """Rate limits, timeouts, 5xx — may be retried when retries are enabled."""


class NonRetryableError(LLMClientError):
    """Auth errors, bad requests, 4xx (non-429) — fail immediately."""


class SummarizationError(BlueprintError):
    """Raised when a single document could not be summarized."""


class SynthesisError(BlueprintError):
    """Raised when the blueprint synthesis call fails."""


class JSONParseError(BlueprintError):
    """LLM response could not be parsed as JSON."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class PromptTemplateError(BlueprintError):
    """Raised when the blueprint prompt template cannot be loaded."""


class InvalidTransitionError(BlueprintError):
    """Raised on an illegal processing-status or run-state transition."""
