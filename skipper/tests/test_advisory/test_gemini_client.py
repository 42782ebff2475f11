"""Tests for the Gemini client with mocked httpx."""

import json

import httpx
import pytest
import respx

from skipper.advisory.gemini_client import GeminiClient, extract_text
from skipper.errors import AdvisoryUnavailable

GENERATE_URL = "https://test-gemini.example.com/models/test-model:generateContent"


def _candidate(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def gemini() -> GeminiClient:
    return GeminiClient(base_url="https://test-gemini.example.com", model="test-model")


class TestGenerate:
    @respx.mock
    def test_success(self, gemini: GeminiClient):
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=_candidate("<b>Smooth sailing</b>"))
        )

        assert gemini.generate("prompt", "txt-key") == "<b>Smooth sailing</b>"

    @respx.mock
    def test_request_shape(self, gemini: GeminiClient):
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=_candidate("ok"))
        )

        gemini.generate("How is the sea?", "txt-key")
        request = route.calls[0].request
        assert request.url.params["key"] == "txt-key"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {
            "contents": [{"parts": [{"text": "How is the sea?"}]}]
        }

    @respx.mock
    def test_transport_error_is_unreachable(self, gemini: GeminiClient):
        respx.post(GENERATE_URL).mock(side_effect=httpx.ConnectTimeout("slow"))

        with pytest.raises(AdvisoryUnavailable) as exc:
            gemini.generate("prompt", "txt-key")
        assert exc.value.reason == AdvisoryUnavailable.UNREACHABLE

    @respx.mock
    def test_error_body_is_malformed(self, gemini: GeminiClient):
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(
                400, json={"error": {"code": 400, "message": "API key not valid"}}
            )
        )

        with pytest.raises(AdvisoryUnavailable) as exc:
            gemini.generate("prompt", "bad-key")
        assert exc.value.reason == AdvisoryUnavailable.MALFORMED

    @respx.mock
    def test_non_json_is_malformed(self, gemini: GeminiClient):
        respx.post(GENERATE_URL).mock(return_value=httpx.Response(200, text="oops"))

        with pytest.raises(AdvisoryUnavailable) as exc:
            gemini.generate("prompt", "txt-key")
        assert exc.value.reason == AdvisoryUnavailable.MALFORMED


class TestExtractText:
    def test_path_present(self):
        assert extract_text(_candidate("hi")) == "hi"

    def test_no_candidates(self):
        assert extract_text({"candidates": []}) is None

    def test_blocked_prompt(self):
        assert extract_text({"promptFeedback": {"blockReason": "SAFETY"}}) is None

    def test_not_a_dict(self):
        assert extract_text(None) is None
        assert extract_text(["candidates"]) is None
