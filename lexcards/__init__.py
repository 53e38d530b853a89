"""lexcards: study-card corpus with per-user mastery tracking."""
