"""Tests for commitgenius.llm module."""

from unittest.mock import MagicMock

import httpx
import pytest

from commitgenius import config
from commitgenius.formatters import FormatOptions
from commitgenius.llm import (
    LLMError,
    LLMResult,
    NoModelsError,
    OllamaProvider,
    OllamaUnavailableError,
    build_prompt,
    get_provider,
    select_model,
)
from commitgenius.llm.prompts import truncate_diff


def make_response(json_data=None, status_code=200, reason_phrase="OK"):
    """Build a fake httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    response.json.return_value = json_data
    return response


@pytest.fixture
def provider():
    """Provider bound to a test host."""
    return OllamaProvider(model="llama2", host="http://ollama:11434/", temperature=0.7, timeout=5)


class TestSelectModel:
    """Tests for select_model function."""

    def test_requested_model_available(self):
        """Test that an installed requested model is kept."""
        assert select_model("mistral", ["llama2", "mistral"]) == "mistral"

    def test_falls_back_to_first_model(self):
        """Test fallback when the requested model is missing."""
        assert select_model("codellama", ["llama2", "mistral"]) == "llama2"

    def test_no_request_uses_first_model(self):
        """Test fallback when no model was requested."""
        assert select_model(None, ["phi"]) == "phi"

    def test_no_models_raises(self):
        """Test that an empty model list raises NoModelsError."""
        with pytest.raises(NoModelsError):
            select_model("llama2", [])


class TestOllamaProviderInit:
    """Tests for OllamaProvider construction."""

    def test_strips_trailing_slash(self, provider):
        """Test that the host is normalized."""
        assert provider.host == "http://ollama:11434"

    def test_uses_config_defaults(self, mocker):
        """Test that missing values come from the active config."""
        mocker.patch.object(config, "ACTIVE_MODEL", "mistral")
        mocker.patch.object(config, "HOST", "http://example:1234")
        mocker.patch.object(config, "TEMPERATURE", 0.2)

        provider = OllamaProvider()

        assert provider.model == "mistral"
        assert provider.host == "http://example:1234"
        assert provider.temperature == 0.2

    def test_get_provider(self):
        """Test the provider factory."""
        provider = get_provider(model="phi", temperature=0.1)

        assert isinstance(provider, OllamaProvider)
        assert provider.model == "phi"
        assert provider.temperature == 0.1


class TestAvailability:
    """Tests for is_available and list_models."""

    def test_is_available(self, mocker, provider):
        """Test a reachable service."""
        mock_get = mocker.patch("httpx.get", return_value=make_response({"models": []}))

        assert provider.is_available() is True
        mock_get.assert_called_once_with("http://ollama:11434/api/tags", timeout=5)

    def test_is_not_available(self, mocker, provider):
        """Test an unreachable service."""
        mocker.patch("httpx.get", side_effect=httpx.ConnectError("connection refused"))

        assert provider.is_available() is False

    def test_error_status_is_not_available(self, mocker, provider):
        """Test that an HTTP error status counts as unavailable."""
        response = make_response({})
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "500", request=MagicMock(), response=MagicMock()
        )
        mocker.patch("httpx.get", return_value=response)

        assert provider.is_available() is False

    def test_list_models(self, mocker, provider):
        """Test listing installed models."""
        mocker.patch(
            "httpx.get",
            return_value=make_response({"models": [{"name": "llama2:latest"}, {"name": "mistral"}]}),
        )

        assert provider.list_models() == ["llama2:latest", "mistral"]

    def test_list_models_empty(self, mocker, provider):
        """Test listing when nothing is installed."""
        mocker.patch("httpx.get", return_value=make_response({}))

        assert provider.list_models() == []

    def test_non_object_tags_body(self, mocker, provider):
        """Test that a JSON list from the tags endpoint is reported, not crashed on."""
        mocker.patch("httpx.get", return_value=make_response(["llama2"]))

        assert provider.is_available() is False
        with pytest.raises(OllamaUnavailableError):
            provider.list_models()

    def test_list_models_unreachable(self, mocker, provider):
        """Test that list_models raises when the service is down."""
        mocker.patch("httpx.get", side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(OllamaUnavailableError):
            provider.list_models()


class TestComplete:
    """Tests for complete and build_request."""

    def test_build_request_caps_generation(self, provider):
        """Test the generation options sent to Ollama."""
        payload = provider.build_request("prompt")

        assert payload["model"] == "llama2"
        assert payload["stream"] is False
        assert payload["options"] == {
            "temperature": config.MAX_TEMPERATURE,
            "num_predict": config.MAX_TOKENS,
            "top_p": config.TOP_P,
            "top_k": config.TOP_K,
        }

    def test_build_request_keeps_low_temperature(self):
        """Test that temperatures under the cap are kept."""
        provider = OllamaProvider(model="llama2", host="http://ollama", temperature=0.1)

        assert provider.build_request("p")["options"]["temperature"] == 0.1

    def test_complete(self, mocker, provider):
        """Test a successful completion."""
        mock_post = mocker.patch("httpx.post", return_value=make_response({"response": "Add login"}))

        assert provider.complete("prompt") == "Add login"
        args, kwargs = mock_post.call_args
        assert args[0] == "http://ollama:11434/api/generate"
        assert kwargs["json"]["prompt"] == "prompt"

    def test_complete_connection_error(self, mocker, provider):
        """Test that network errors raise OllamaUnavailableError."""
        mocker.patch("httpx.post", side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(OllamaUnavailableError):
            provider.complete("prompt")

    def test_complete_api_error(self, mocker, provider):
        """Test that an error status is reported with Ollama's message."""
        mocker.patch(
            "httpx.post",
            return_value=make_response({"error": "model 'x' not found"}, status_code=404, reason_phrase="Not Found"),
        )

        with pytest.raises(LLMError) as exc_info:
            provider.complete("prompt")

        assert "model 'x' not found" in str(exc_info.value)

    def test_complete_missing_response(self, mocker, provider):
        """Test that a body without a response field raises LLMError."""
        mocker.patch("httpx.post", return_value=make_response({"done": True}))

        with pytest.raises(LLMError):
            provider.complete("prompt")

    @pytest.mark.parametrize("body", [["Add login"], "Add login", 42, {"response": None}])
    def test_complete_non_object_body(self, mocker, provider, body):
        """Test that unexpected JSON shapes raise LLMError."""
        mocker.patch("httpx.post", return_value=make_response(body))

        with pytest.raises(LLMError):
            provider.complete("prompt")

    def test_complete_api_error_non_object_body(self, mocker, provider):
        """Test that an error status with a list body uses the reason phrase."""
        mocker.patch(
            "httpx.post",
            return_value=make_response(["boom"], status_code=500, reason_phrase="Internal Server Error"),
        )

        with pytest.raises(LLMError) as exc_info:
            provider.complete("prompt")

        assert "Internal Server Error" in str(exc_info.value)

    def test_complete_invalid_json(self, mocker, provider):
        """Test that a non-JSON body raises LLMError."""
        response = make_response()
        response.json.side_effect = ValueError("Expecting value")
        mocker.patch("httpx.post", return_value=response)

        with pytest.raises(LLMError):
            provider.complete("prompt")


class TestGenerate:
    """Tests for generate method."""

    def test_generate_cleans_completion(self, mocker, provider, sample_diff):
        """Test that the completion is turned into a subject."""
        mocker.patch(
            "httpx.post",
            return_value=make_response({"response": "Here is the commit message: add login form."}),
        )

        result = provider.generate(sample_diff)

        assert isinstance(result, LLMResult)
        assert result.message == "Add login form"
        assert result.raw_response == "Here is the commit message: add login form."
        assert result.model == "llama2"

    def test_generate_conventional(self, mocker, provider, docs_diff):
        """Test that format options are applied."""
        mocker.patch("httpx.post", return_value=make_response({"response": "Update README"}))

        result = provider.generate(docs_diff, options=FormatOptions(use_conventional=True))

        assert result.message == "docs: Update README"

    def test_generate_uses_language_prompt(self, mocker, provider, sample_diff):
        """Test that the Vietnamese prompt is sent for vi."""
        mock_post = mocker.patch("httpx.post", return_value=make_response({"response": "Thêm"}))

        provider.generate(sample_diff, language="vi")

        prompt = mock_post.call_args.kwargs["json"]["prompt"]
        assert "tiếng Việt" in prompt

    def test_generate_empty_diff(self, provider):
        """Test that an empty diff raises LLMError."""
        with pytest.raises(LLMError):
            provider.generate("")


class TestPrompts:
    """Tests for prompt building."""

    def test_build_prompt_embeds_diff(self, sample_diff):
        """Test that the diff is part of the prompt."""
        prompt = build_prompt(sample_diff)

        assert sample_diff in prompt
        assert prompt.endswith("Answer:")

    def test_unknown_language_uses_english(self, sample_diff):
        """Test the prompt language fallback."""
        assert build_prompt(sample_diff, "fr") == build_prompt(sample_diff, "en")

    def test_truncate_diff(self):
        """Test that long diffs are cut and marked."""
        result = truncate_diff("x" * 100, max_chars=10)

        assert result == "x" * 10 + "\n...[truncated]\n"

    def test_short_diff_not_truncated(self):
        """Test that short diffs are unchanged."""
        assert truncate_diff("abc", max_chars=10) == "abc"
