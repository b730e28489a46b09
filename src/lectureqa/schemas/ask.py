"""Pydantic schemas for the answer endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class AskRequest(BaseModel):
    """Question submitted by the browser client.

    Required fields are checked by the answer service so that a missing
    field is reported together with every other missing one.
    """

    model_config = ConfigDict(populate_by_name=True)

    question: str | None = Field(None, description="Question text")
    model: str | None = Field(None, description="Provider: gemini or deepseek")
    course_name: str | None = Field(
        None, alias="courseName", description="Course the question belongs to"
    )
    # Consumed by the client's own persistence flow, not by the answer proxy.
    lecture_date: str | None = Field(None, alias="lectureDate")
    course_id: int | None = Field(None, alias="courseId")
    faculty_id: int | None = Field(None, alias="facultyId")


class AskResponse(BaseModel):
    """Successful answer."""

    answer: str = Field(..., min_length=1, description="Generated answer text")
