"""
Learning bounded context - Domain layer.

This context handles the study-card corpus:
- Flashcards with interchangeable content shapes (open answer, multiple
  choice, yes/no)
- Per-user mastery progress

Aggregates:
- Flashcard: The main aggregate root for study cards
"""
