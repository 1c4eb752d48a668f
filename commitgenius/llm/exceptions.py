"""LLM-related exception classes.

Contains all exception classes for inference operations:
- LLMError: Base exception for LLM-related errors
- OllamaUnavailableError: Raised when the Ollama service cannot be reached
- NoModelsError: Raised when Ollama has no models installed
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class OllamaUnavailableError(LLMError):
    """Raised when the Ollama service cannot be reached."""

    pass


class NoModelsError(LLMError):
    """Raised when the Ollama service reports no installed models."""

    pass
