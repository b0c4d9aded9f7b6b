"""
Study gateway package.

AI gateway for study-content generation: summaries, flashcards, quizzes,
exercises, Feynman topics, chat, transcription and link ingestion.
"""

__version__ = "0.1.0"
