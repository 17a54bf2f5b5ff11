from typing import Any

from pydantic import BaseModel, Field, field_validator


class WebSearchInput(BaseModel):
    """Arguments the model must supply to the `websearch` function."""

    query: str = Field(..., description="The search query to do web search on.")
    count: int | None = Field(
        default=None,
        description="Optional field to mention how many web search results are needed",
    )

    # Anything but a non-negative integer falls back to the default count
    @field_validator("count", mode="before")
    def drop_unusable_count(cls, v: Any):  # pylint: disable=no-self-argument
        if isinstance(v, int) and not isinstance(v, bool) and v >= 0:
            return v
        return None


class PythonInvokerInput(BaseModel):
    """Arguments the model must supply to the `python_invoker` function."""

    script: str = Field(..., description="The Python script to execute.")
    args: list[str] = Field(
        default_factory=list,
        description="Optional arguments to pass to the script.",
    )

    # Keep only the string items; a non-list value means no arguments
    @field_validator("args", mode="before")
    def keep_string_args(cls, v: Any):  # pylint: disable=no-self-argument
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, str)]


class PythonScriptResult(BaseModel):
    stdout: str
    stderr: str
    exit_code: int | None = None

    def render(self) -> str:
        return (
            f"Exit Code: {self.exit_code}\nStdout: {self.stdout}\nStderr: {self.stderr}"
        )
