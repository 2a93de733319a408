"""Quizmaker: quiz authoring backend core (users, sessions, MCQs, attempts)."""
