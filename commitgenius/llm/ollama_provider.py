"""Ollama provider implementation."""

from dataclasses import dataclass
from typing import Optional

import httpx

from commitgenius import config
from commitgenius.formatters import FormatOptions, render_commit_message
from commitgenius.llm.exceptions import LLMError, NoModelsError, OllamaUnavailableError
from commitgenius.llm.prompts import DEFAULT_MAX_DIFF_CHARS, build_prompt
from commitgenius.locales import FALLBACK_LANGUAGE


@dataclass
class LLMResult:
    """Result from a generation call."""

    message: str
    raw_response: str
    model: str


def select_model(requested: Optional[str], available: list[str]) -> str:
    """Pick the model to use.

    Args:
        requested: The configured or requested model name.
        available: Models installed in Ollama.

    Returns:
        The requested model if installed, otherwise the first installed model.

    Raises:
        NoModelsError: If no models are installed.
    """
    if not available:
        raise NoModelsError("No models found in Ollama. Pull one first, e.g.: ollama pull llama2")
    if requested and requested in available:
        return requested
    return available[0]


class OllamaProvider:
    """Client for a locally running Ollama service."""

    def __init__(
        self,
        model: str | None = None,
        host: str | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        max_tokens: int = config.MAX_TOKENS,
    ):
        """Initialize the Ollama provider.

        Args:
            model: The model to use. Defaults to the configured model.
            host: Base URL of the Ollama service. Defaults to the configured host.
            temperature: Sampling temperature, capped at config.MAX_TEMPERATURE.
            timeout: Request timeout in seconds.
            max_tokens: Maximum tokens to generate.
        """
        self.model = model or config.ACTIVE_MODEL
        self.host = (host or config.HOST).rstrip("/")
        self.temperature = config.TEMPERATURE if temperature is None else temperature
        self.timeout = timeout or config.TIMEOUT
        self.max_tokens = max_tokens

    def _url(self, path: str) -> str:
        return f"{self.host}{path}"

    def _fetch_tags(self) -> dict:
        try:
            response = httpx.get(self._url("/api/tags"), timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise OllamaUnavailableError(f"Failed to get available models from Ollama: {e}")

        if not isinstance(data, dict):
            raise OllamaUnavailableError("Ollama returned an unexpected model list")
        return data

    def is_available(self) -> bool:
        """Check if the Ollama service is reachable.

        Returns:
            True if the tags endpoint answers successfully.
        """
        try:
            self._fetch_tags()
            return True
        except OllamaUnavailableError:
            return False

    def list_models(self) -> list[str]:
        """List installed model names.

        Returns:
            Model names, empty if none are installed.

        Raises:
            OllamaUnavailableError: If the service cannot be reached.
        """
        data = self._fetch_tags()
        models = data.get("models") or []
        return [model["name"] for model in models if isinstance(model, dict) and model.get("name")]

    def build_request(self, prompt: str) -> dict:
        """Build the /api/generate request payload."""
        return {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": min(self.temperature, config.MAX_TEMPERATURE),
                "num_predict": self.max_tokens,
                "top_p": config.TOP_P,
                "top_k": config.TOP_K,
            },
        }

    def complete(self, prompt: str) -> str:
        """Send a prompt to Ollama and return the raw completion text.

        Args:
            prompt: The full prompt.

        Returns:
            The completion text.

        Raises:
            OllamaUnavailableError: If the service cannot be reached.
            LLMError: If Ollama answers with an error or without a response.
        """
        try:
            response = httpx.post(
                self._url("/api/generate"),
                json=self.build_request(prompt),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise OllamaUnavailableError(f"No response from Ollama API. Make sure Ollama is running. ({e})")

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            detail = body.get("error") if isinstance(body, dict) else None
            raise LLMError(f"Ollama API error: {detail or response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as e:
            raise LLMError(f"Ollama API returned invalid JSON: {e}")

        raw_response = data.get("response") if isinstance(data, dict) else None
        if not isinstance(raw_response, str):
            raise LLMError("No response from Ollama API")
        return raw_response

    def generate(
        self,
        diff: str,
        language: str = FALLBACK_LANGUAGE,
        options: Optional[FormatOptions] = None,
        max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
    ) -> LLMResult:
        """Generate the final commit message for a diff.

        Args:
            diff: The staged diff.
            language: Prompt language.
            options: Formatting options applied to the completion.
            max_diff_chars: Maximum characters of diff sent to the model.

        Returns:
            An LLMResult with the formatted message and the raw completion.

        Raises:
            LLMError: If the diff is empty or the call fails.
        """
        if not diff:
            raise LLMError("No diff provided")

        prompt = build_prompt(diff, language, max_diff_chars)
        raw_response = self.complete(prompt)

        return LLMResult(
            message=render_commit_message(raw_response, diff, options),
            raw_response=raw_response,
            model=self.model,
        )
