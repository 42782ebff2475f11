"""Google Gemini generateContent client."""

import logging

import httpx

from skipper.errors import AdvisoryUnavailable

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-3.0-flash"


class GeminiClient:
    def __init__(
        self,
        base_url: str = GEMINI_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = 15.0,
    ):
        self.base_url = base_url
        self.model = model
        self.timeout = timeout

    def generate(self, prompt: str, api_key: str) -> str:
        """Send a single-turn prompt and return the first candidate's text.

        Raises AdvisoryUnavailable with reason UNREACHABLE on transport
        failure, MALFORMED when the response lacks the text path.
        """
        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            resp = httpx.post(
                url,
                params={"key": api_key},
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.warning("Gemini request failed: %s", e)
            raise AdvisoryUnavailable(
                f"Request failed: {e}", AdvisoryUnavailable.UNREACHABLE
            ) from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        text = extract_text(data)
        if text is None:
            logger.warning(
                "Gemini response %d has no candidate text: %s",
                resp.status_code, resp.text[:200],
            )
            raise AdvisoryUnavailable(
                f"HTTP {resp.status_code}: no candidate text",
                AdvisoryUnavailable.MALFORMED,
            )
        return text


def extract_text(data: object) -> str | None:
    """Pull candidates[0].content.parts[0].text out of a response body."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None
