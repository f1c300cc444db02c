"""Model provider and response exceptions.

Contains:
- LLMError: Base exception for model-related errors
- MissingAPIKeyError: Required API key is not configured
- ProviderTimeoutError: The model call exceeded its timeout
- ProviderInvocationError: The model call failed for another reason
- ParseError: The response could not be turned into a commit plan
  - NoJSONFoundError, InvalidJSONError, SchemaValidationError
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class ProviderTimeoutError(LLMError):
    """Raised when the model call times out."""

    pass


class ProviderInvocationError(LLMError):
    """Raised when the model call fails for a reason other than a timeout."""

    pass


class ParseError(LLMError):
    """Raised when a model response cannot be parsed into a commit plan."""

    reason = "parse_error"


class NoJSONFoundError(ParseError):
    """Raised when the response contains no JSON object."""

    reason = "no_json"


class InvalidJSONError(ParseError):
    """Raised when the extracted text is not valid JSON."""

    reason = "invalid_json"


class SchemaValidationError(ParseError):
    """Raised when the JSON does not match the commit plan schema."""

    reason = "schema_mismatch"
