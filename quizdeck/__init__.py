"""QuizDeck - keyboard-driven flashcard presenter."""

__version__ = "1.0.0"
