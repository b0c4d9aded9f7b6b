"""
Summary service.

Chunked-summary orchestration plus summary editing and title generation.

Flow of generate_summary:
1. Truncate the input to a balanced context (skipped for comprehensive)
2. Split into word-bounded chunks at the detail level's budget
3. One chunk: one completion, sanitized
4. Several chunks: one completion per chunk in order ("part i of n"),
   each sanitized, then a single merge completion, sanitized

Any failing call aborts the whole run. Rate-limit errors propagate
unchanged; everything else is wrapped in GenerationError.

Dependencies: study_gateway.core, study_gateway.boundary.gateway
System role: Summary orchestration layer
"""

import logging

from study_gateway.application.services.gateway_service import GatewayService
from study_gateway.core.exceptions import (
    EmptyResultError,
    GenerationError,
    RateLimitError,
    ValidationError,
)
from study_gateway.core.prompts.length_targets import estimate_length_target
from study_gateway.core.prompts.summary_prompt import (
    build_edit_messages,
    build_merge_messages,
    build_summary_messages,
    build_title_messages,
)
from study_gateway.core.text.chunker import (
    build_balanced_context,
    split_into_chunks,
    truncate_words,
)
from study_gateway.core.text.sanitizer import DEFAULT_TITLE, clean_title, sanitize_html_output
from study_gateway.models.generation import DocumentRef
from study_gateway.models.study_content import DetailLevel

logger = logging.getLogger(__name__)


class SummaryService(GatewayService):
    """Generates, merges and edits HTML summaries and note titles."""

    async def generate_summary(
        self,
        content: str,
        documents: list[DocumentRef] | None = None,
        detail_level: DetailLevel = DetailLevel.STANDARD,
        language: str = "en",
    ) -> str:
        """
        Summarize note content, chunking when it exceeds one call's budget.

        Args:
            content: Note text including transcripts and document text
            documents: Attached documents listed in the prompt
            detail_level: concise, standard or comprehensive
            language: ISO 639-1 code of the content

        Returns:
            str: Sanitized HTML summary

        Raises:
            ValidationError: If content is blank
            RateLimitError: If the generation quota is exhausted
            GenerationError: For any other failure
        """
        if not content or not content.strip():
            raise ValidationError("Content is required to generate a summary", field="content")

        detail_level = DetailLevel(detail_level)
        profile = self.settings.profile_for(detail_level)
        logger.info(
            f"{__name__}:generate_summary - START detail={detail_level.value} "
            f"chars={len(content)} language={language}"
        )

        try:
            source = content
            if profile.truncate_words is not None:
                source = build_balanced_context(content, profile.truncate_words)

            chunks = split_into_chunks(source, profile.chunk_words)

            if len(chunks) == 1:
                summary = await self._summarize_chunk(
                    chunks[0], detail_level, documents, language, part=None
                )
            else:
                partials = []
                for index, chunk in enumerate(chunks, start=1):
                    logger.info(
                        f"{__name__}:generate_summary - part {index}/{len(chunks)}"
                    )
                    partials.append(
                        await self._summarize_chunk(
                            chunk, detail_level, documents, language, part=(index, len(chunks))
                        )
                    )
                summary = await self._merge(partials, detail_level, language)

            if not summary:
                raise EmptyResultError("summary")

        except RateLimitError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:generate_summary - {type(e).__name__}: {e}")
            raise GenerationError("summary", e) from e

        logger.info(
            f"{__name__}:generate_summary - SUCCESS chunks={len(chunks)} chars={len(summary)}"
        )
        return summary

    async def _summarize_chunk(
        self,
        chunk: str,
        detail_level: DetailLevel,
        documents: list[DocumentRef] | None,
        language: str,
        part: tuple[int, int] | None,
    ) -> str:
        profile = self.settings.profile_for(detail_level)
        target = estimate_length_target(len(chunk), profile, self.settings)
        messages = build_summary_messages(
            chunk,
            detail_level,
            target,
            documents=documents,
            language=language,
            part=part,
        )
        raw = await self._complete(messages, self.settings.summary_temperature, "summary")
        return sanitize_html_output(raw)

    async def _merge(
        self,
        partials: list[str],
        detail_level: DetailLevel,
        language: str,
    ) -> str:
        profile = self.settings.profile_for(detail_level)
        estimated_source_chars = sum(len(part) for part in partials) * self.settings.merge_length_factor
        target = estimate_length_target(estimated_source_chars, profile, self.settings)
        messages = build_merge_messages(partials, detail_level, target, language=language)
        raw = await self._complete(messages, self.settings.merge_temperature, "summary")
        return sanitize_html_output(raw)

    async def edit_summary(self, summary: str, instruction: str, language: str = "en") -> str:
        """
        Revise an existing HTML summary following a user instruction.

        Args:
            summary: Current HTML summary
            instruction: Requested change, e.g. "Add an analogy for entropy"
            language: ISO 639-1 code of the summary

        Returns:
            str: Sanitized revised summary

        Raises:
            ValidationError: If summary or instruction is blank
            RateLimitError: If the generation quota is exhausted
            GenerationError: For any other failure
        """
        if not summary.strip():
            raise ValidationError("A summary is required to edit", field="summary")
        if not instruction.strip():
            raise ValidationError("An edit instruction is required", field="instruction")

        logger.info(f"{__name__}:edit_summary - START chars={len(summary)}")
        try:
            raw = await self._complete(
                build_edit_messages(summary, instruction, language),
                self.settings.edit_temperature,
                "summary edit",
            )
            edited = sanitize_html_output(raw)
            if not edited:
                raise EmptyResultError("summary edit")
        except RateLimitError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:edit_summary - {type(e).__name__}: {e}")
            raise GenerationError("summary edit", e, action="edit summary") from e
        return edited

    async def generate_title(
        self,
        content: str,
        documents: list[DocumentRef] | None = None,
        language: str = "en",
    ) -> str:
        """
        Generate a 2-4 word note title.

        Falls back to "New Note" on any failure except an exhausted quota.

        Args:
            content: Note content
            documents: Attached documents listed in the prompt
            language: ISO 639-1 code of the content

        Returns:
            str: Title of at most 35 characters

        Raises:
            RateLimitError: If the generation quota is exhausted
        """
        if not content or not content.strip():
            return DEFAULT_TITLE

        sample = truncate_words(content.strip(), self.settings.title_input_words)
        try:
            raw = await self._complete(
                build_title_messages(sample, documents, language),
                self.settings.title_temperature,
                "title",
            )
        except RateLimitError:
            raise
        except Exception as e:
            logger.warning(f"{__name__}:generate_title - {type(e).__name__}: {e}")
            return DEFAULT_TITLE

        return clean_title(raw)
