"""Instruction prompt rendered around a student's question."""

_PERSONA = "You are a professor with deep knowledge of {course_name}."

_ANSWER_TEMPLATE = (
    _PERSONA
    + "\n"
    "A student attending your course has asked the question below.\n"
    "\n"
    "Instructions:\n"
    "1. Think through the question step by step and analyse it before answering.\n"
    "2. If the question is incomplete or only asks for an answer, still give a "
    "complete and correct answer.\n"
    "3. For mathematical or scientific questions, explain using formulas "
    "wherever possible.\n"
    "4. You may reason in any language, but write the final answer in Japanese.\n"
    "5. Write mathematical notation as TeX inside Markdown "
    "($...$ inline, $$...$$ for display equations).\n"
    "6. Structure the whole answer as Markdown with clear paragraphs.\n"
    "\n"
    "Question:\n"
    "{question}"
)


def build_system_prompt(course_name: str) -> str:
    """Return the persona line used as a chat system message."""
    return _PERSONA.format(course_name=course_name)


def build_answer_prompt(question: str, course_name: str) -> str:
    """Render the full instruction prompt for a question.

    Args:
        question: The student's question, inserted verbatim.
        course_name: Name of the course the professor persona teaches.

    Returns:
        The rendered prompt text.
    """
    return _ANSWER_TEMPLATE.format(course_name=course_name, question=question)
