"""Status-line helpers, rust-project.json generation and worked exercise solutions."""

__version__ = "5.2.1"