"""LLM provider module for commitgenius.

This module provides the interface to the local Ollama service.
The host, model and temperature are configured in commitgenius/config.py.
"""

from dotenv import load_dotenv

from commitgenius.llm.exceptions import LLMError, NoModelsError, OllamaUnavailableError
from commitgenius.llm.ollama_provider import LLMResult, OllamaProvider, select_model
from commitgenius.llm.prompts import PROMPT_TEMPLATES, build_prompt

# Load environment variables (e.g. OLLAMA_HOST) from .env file
load_dotenv()


def get_provider(
    model: str | None = None,
    temperature: float | None = None,
) -> OllamaProvider:
    """Get an Ollama provider instance.

    Args:
        model: The model to use. Defaults to ACTIVE_MODEL from config.
        temperature: Sampling temperature. Defaults to TEMPERATURE from config.

    Returns:
        An OllamaProvider bound to the configured host.
    """
    return OllamaProvider(model=model, temperature=temperature)


# Export commonly used items
__all__ = [
    "LLMError",
    "NoModelsError",
    "OllamaUnavailableError",
    "LLMResult",
    "OllamaProvider",
    "PROMPT_TEMPLATES",
    "build_prompt",
    "get_provider",
    "select_model",
]
