"""Worked solutions to the exercises, written as plain Python modules."""

__all__ = [
    "basics",
    "concurrency",
    "containers",
    "errors",
    "hashmaps",
    "iterators",
    "messages",
    "options",
    "quizzes",
    "structs",
    "text",
    "traits",
]