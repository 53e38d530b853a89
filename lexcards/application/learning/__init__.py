"""
Learning bounded context - Application layer.

Use cases for creating, reading, revising and deleting flashcards,
recording review progress and listing/aggregating the corpus.
"""
