"""
Structured study-content prompts.

Each prompt asks for an exact number of items in a fixed JSON shape and
reminds the model that the source text is inline, which heads off "I cannot
access the file" refusals.

Dependencies: langchain_core.prompts
System role: Prompt templates for the structured-content generators
"""

from langchain_core.prompts import ChatPromptTemplate

from study_gateway.core.prompts.languages import language_instruction
from study_gateway.core.prompts.renderer import render_messages
from study_gateway.models.chat import ChatMessage

_INLINE_SOURCE_NOTE = (
    "The text below is the actual content extracted from documents - you do NOT "
    "need to access any files. Use this text directly"
)

_HINT_RULE = (
    'include a "hint" property that provides a subtle tip without giving the '
    "answer away. The hint should guide thinking but not spoil the answer."
)

FLASHCARDS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", 'You are a helpful assistant that creates educational flashcards. Return a JSON array of flashcards with "front", "back", and "hint" properties.{language_instruction}'),
    ("human", f"""Create EXACTLY {{count}} flashcards from the following text content. {_INLINE_SOURCE_NOTE} to create flashcards.{{language_instruction}}

Requirements:
1. Give EQUAL coverage to all sections; do not focus only on early sections
2. Progress difficulty (definitions/facts -> concepts/relationships -> applications)
3. Ensure breadth across distinct topics; avoid redundancy
4. If the same fact appears multiple times, MERGE it into one clear card
5. For each flashcard, {_HINT_RULE}

Text Content:
{{content}}

Return exactly {{count}} flashcards as a JSON array with "front", "back", and "hint" properties."""),
])

QUIZ_PROMPT = ChatPromptTemplate.from_messages([
    ("system", 'You are a helpful assistant that creates quiz questions. Return a JSON array of questions with "question", "options" (array of 4 strings), "correctAnswer" (index 0-3), "hint", and "explanation" properties.{language_instruction}'),
    ("human", f"""Create EXACTLY {{count}} quiz questions from the following text content. {_INLINE_SOURCE_NOTE} to create quiz questions.{{language_instruction}}

Requirements:
1. Give EQUAL coverage to all sections; do not bias earlier sections
2. Mix difficulty (recall -> application -> analysis) and cover different topics
3. Make distractors plausible but clearly wrong
4. Avoid duplicate questions about the same fact
5. For each question, {_HINT_RULE}
6. For each question, include a SHORT "explanation" (2-3 sentences) of why the correct option is right and the others are wrong. Do NOT simply state which option is correct.

Text Content:
{{content}}

Return exactly {{count}} quiz questions as a JSON array with "question", "options" (array of 4 strings), "correctAnswer" (index 0-3), "hint", and "explanation" properties."""),
])

EXERCISES_PROMPT = ChatPromptTemplate.from_messages([
    ("system", 'You are a helpful assistant that creates practice exercises. Return a JSON array of exercises with "question", "solution", "notes", and "hint" properties.{language_instruction}'),
    ("human", f"""Create EXACTLY {{count}} practice exercises from the following text content. {_INLINE_SOURCE_NOTE} to create exercises.{{language_instruction}}

Make sure to:
1. Cover ALL important concepts and key topics from the text
2. Progress in difficulty (simple applications first, then more complex ones)
3. Mix problem-solving, application, analysis and synthesis tasks
4. Give each exercise a clear, detailed solution
5. Include helpful notes with tips or common pitfalls
6. For each exercise, {_HINT_RULE}

Text Content:
{{content}}

Return exactly {{count}} exercises as a JSON array with "question", "solution", "notes", and "hint" properties."""),
])

FEYNMAN_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "You are an educational assistant helping create practice topics.{language_instruction}"),
    ("human", """Based on this note content, generate exactly {count} specific topics that a student could practice explaining using the Feynman Technique. Focus on the main concepts, terms, or ideas that would be good for teaching.{language_instruction}

Note content:
{content}

Return a JSON array of objects with "title" (short topic title starting with "Explain:") and "description" (brief description). Keep titles concise (max 50 chars). Generate exactly {count} topics."""),
])


def build_flashcards_messages(content: str, count: int, language: str = "en") -> list[ChatMessage]:
    return render_messages(
        FLASHCARDS_PROMPT,
        content=content,
        count=count,
        language_instruction=language_instruction(language, "the flashcards"),
    )


def build_quiz_messages(content: str, count: int, language: str = "en") -> list[ChatMessage]:
    return render_messages(
        QUIZ_PROMPT,
        content=content,
        count=count,
        language_instruction=language_instruction(language, "the quiz questions"),
    )


def build_exercises_messages(content: str, count: int, language: str = "en") -> list[ChatMessage]:
    return render_messages(
        EXERCISES_PROMPT,
        content=content,
        count=count,
        language_instruction=language_instruction(language, "the exercises"),
    )


def build_feynman_messages(content: str, count: int, language: str = "en") -> list[ChatMessage]:
    return render_messages(
        FEYNMAN_PROMPT,
        content=content,
        count=count,
        language_instruction=language_instruction(language, "the topics"),
    )
