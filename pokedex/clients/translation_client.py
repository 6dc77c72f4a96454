import logging

import httpx
from pydantic import ValidationError

from pokedex.clients.base import BaseHTTPClient
from pokedex.models import TranslationResponse, TranslationResult, TranslationStyle


class TranslationClient(BaseHTTPClient):
    BASE_URL = "https://api.funtranslations.com"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 5.0,
        retry_attempts: int = 3,
        retry_delay: float = 0.6,
        logger: logging.Logger | None = None,
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            retry_attempts=retry_attempts,
            retry_delay=retry_delay,
            logger=logger or logging.getLogger(__name__),
        )

    def _failure(self, code: int | None, message: str) -> TranslationResult:
        self.logger.error(f"[translate] There was a problem translating text: Code: {code} Message: {message}")
        return TranslationResult(error_code=code, error_message=message)

    async def translate(self, text: str, translation_style: TranslationStyle) -> TranslationResult:
        """
        Translates text with the given style. Never raises: any failure is
        returned as a TranslationResult whose ``ok`` is False.
        """
        url = f"/translate/{translation_style.value}"

        try:
            # The text travels verbatim as a query parameter; httpx does the URL encoding
            response = await self.get(url, params={"text": text})
        except httpx.DecodingError as e:
            return self._failure(None, f"Translation API response could not be decoded: {e}")
        except httpx.RequestError as e:
            return self._failure(None, f"Translation API network error: {e}")

        self.logger.info(f"[translate] Translation API responded {response.status_code} {response.reason_phrase}")

        try:
            envelope = TranslationResponse.model_validate_json(response.content)
        except ValidationError:
            envelope = None

        if not response.is_success:
            code, message = response.status_code, f"Translation API failed with status {response.status_code}."
            if response.status_code == 429:
                message += " Rate limit exceeded."
            if envelope is not None and envelope.error is not None and envelope.error.populated:
                code = envelope.error.code if envelope.error.code is not None else code
                message = envelope.error.message or message
            return self._failure(code, message)

        if envelope is None:
            return self._failure(response.status_code, "Translation API returned an unexpected response format.")

        if envelope.error is not None and envelope.error.populated:
            return self._failure(envelope.error.code, envelope.error.message or "Translation API reported an error.")

        if envelope.contents is None or envelope.contents.translated is None:
            return self._failure(response.status_code, "Translation API response has no translated text.")

        return TranslationResult(translated=envelope.contents.translated)
