"""LectureQA: course Q&A backend with LLM-generated answers."""

__version__ = "0.1.0"
