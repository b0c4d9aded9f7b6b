"""
Language detection and tutor chat prompts.

Dependencies: langchain_core.prompts
System role: Prompt templates for language detection and note chat
"""

from langchain_core.prompts import ChatPromptTemplate

from study_gateway.core.prompts.renderer import render_messages
from study_gateway.models.chat import ChatMessage, ChatRole

LANGUAGE_DETECTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", 'You are a language detection assistant. Analyze the provided text and return ONLY the ISO 639-1 language code (e.g., "en" for English, "de" for German, "fr" for French, "es" for Spanish, "it" for Italian, "pt" for Portuguese, "nl" for Dutch, "ru" for Russian, "zh" for Chinese, "ja" for Japanese, "ko" for Korean). Return only the two-letter code, nothing else.'),
    ("human", "{sample}"),
])

TUTOR_SYSTEM_PROMPT = """You are a helpful educational assistant. Use the following context from the note to answer questions. If the context does not cover the question, say so and answer from general knowledge.
Format math with LaTeX ($...$ inline, $$...$$ block).

Note context:
{context}"""


def build_language_messages(sample: str) -> list[ChatMessage]:
    return render_messages(LANGUAGE_DETECTION_PROMPT, sample=sample)


def build_tutor_system_message(context: str) -> ChatMessage:
    """System message grounding the chat in note content."""
    return ChatMessage(role=ChatRole.SYSTEM, content=TUTOR_SYSTEM_PROMPT.format(context=context))
