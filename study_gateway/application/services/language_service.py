"""
Language detection service.

Dependencies: study_gateway.core, study_gateway.boundary.gateway
System role: Detects the ISO 639-1 language of note content
"""

import logging
import re

from study_gateway.application.services.gateway_service import GatewayService
from study_gateway.core.exceptions import CompletionError, RateLimitError
from study_gateway.core.prompts.assistant_prompt import build_language_messages
from study_gateway.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}$")


class LanguageService(GatewayService):
    """Detects the language study content should be generated in."""

    async def detect_language(self, content: str) -> str:
        """
        Detect the language of content from a leading sample.

        Args:
            content: Note content

        Returns:
            str: Two-letter lowercase code, "en" when detection fails

        Raises:
            RateLimitError: If the generation quota is exhausted
        """
        sample = (content or "").strip()[: self.settings.language_sample_chars]
        if not sample:
            return DEFAULT_LANGUAGE

        try:
            raw = await self._complete(
                build_language_messages(sample),
                self.settings.language_temperature,
                "language detection",
            )
        except RateLimitError:
            raise
        except CompletionError as e:
            logger.warning(f"{__name__}:detect_language - {type(e).__name__}: {e}")
            return DEFAULT_LANGUAGE

        code = raw.strip().strip("\"'`.").strip().lower()
        if not LANGUAGE_CODE_PATTERN.match(code):
            logger.warning(f"{__name__}:detect_language - unexpected response {safe_log_value(code, max_length=20)}")
            return DEFAULT_LANGUAGE

        logger.info(f"{__name__}:detect_language - detected {code}")
        return code
