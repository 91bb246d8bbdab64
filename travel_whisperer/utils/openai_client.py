import logging
from functools import lru_cache
from typing import Any, Optional

from openai import APIConnectionError, APIStatusError, OpenAI

from travel_whisperer.utils.config import Settings
from travel_whisperer.utils.errors import (
    ConfigurationError,
    UpstreamOutcome,
    raise_for_outcome,
)

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """
    Thin wrapper around an OpenAI-compatible chat completion gateway.
    One request per call: no retries, no streaming, SDK default timeout.
    """

    def __init__(self, settings: Settings, sdk_client: Optional[Any] = None):
        self.settings = settings
        self._client = sdk_client

    def _get_client(self):
        if self._client is None:
            self._client = OpenAI(
                api_key=self.settings.api_key,
                base_url=self.settings.gateway_url,
                max_retries=0,
            )
        return self._client

    def complete(self, system_prompt: str, user_prompt: str, failure_message: Optional[str] = None) -> str:
        # key check happens per request so a missing secret fails the call, not the import
        if not self.settings.api_key:
            raise ConfigurationError()

        client = self._get_client()
        try:
            resp = client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except APIStatusError as e:
            outcome = UpstreamOutcome.from_status(e.status_code)
            if outcome is UpstreamOutcome.FAILED:
                logger.error("AI gateway error: %s %s", e.status_code, _error_text(e))
            else:
                logger.warning("AI gateway returned %s (%s)", e.status_code, outcome.value)
            raise_for_outcome(outcome, failure_message)
            raise
        except APIConnectionError as e:
            logger.error("AI gateway unreachable: %s", e)
            raise_for_outcome(UpstreamOutcome.FAILED, failure_message)
            raise

        return resp.choices[0].message.content or ""


@lru_cache()
def client_for(settings: Settings) -> ChatCompletionClient:
    """One client (and one HTTP connection pool) per distinct Settings."""
    return ChatCompletionClient(settings)


def _error_text(error: APIStatusError) -> str:
    try:
        return error.response.text
    except Exception:
        return str(error)
