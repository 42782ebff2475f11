"""Advisory composer: prompt + text provider, degrading to fixed fallbacks."""

import logging

from skipper.advisory.gemini_client import GeminiClient
from skipper.advisory.prompt import build_prompt
from skipper.config.schema import AdvisoryConfig
from skipper.errors import AdvisoryUnavailable
from skipper.models.forecast import ForecastPoint

logger = logging.getLogger(__name__)

ADVISORY_UNREACHABLE_TEXT = "<b>Captain's Radio is down!</b> (Connection Error)"
ADVISORY_MALFORMED_TEXT = "Unable to interpret weather charts right now."


class AdvisoryComposer:
    def __init__(self, client: GeminiClient, config: AdvisoryConfig | None = None):
        self.client = client
        self.config = config or AdvisoryConfig()

    @classmethod
    def from_config(cls, config: AdvisoryConfig) -> "AdvisoryComposer":
        client = GeminiClient(
            base_url=config.base_url,
            model=config.model,
            timeout=config.timeout_seconds,
        )
        return cls(client, config)

    def compose(
        self,
        selected: ForecastPoint,
        alternative: ForecastPoint | None,
        target_ts: int,
        is_seasonal: bool,
        api_key: str,
    ) -> str:
        """Return advisory HTML. Never raises for provider failures."""
        prompt = build_prompt(
            selected,
            alternative,
            target_ts,
            is_seasonal,
            company_name=self.config.company_name,
            region=self.config.region,
            max_words=self.config.max_words,
        )
        try:
            return self.client.generate(prompt, api_key)
        except AdvisoryUnavailable as e:
            logger.warning("Advisory unavailable (%s): %s", e.reason, e)
            if e.reason == AdvisoryUnavailable.UNREACHABLE:
                return ADVISORY_UNREACHABLE_TEXT
            return ADVISORY_MALFORMED_TEXT
