class APIError(Exception):
    """
    Base class for all outbound-call errors raised by this project.

    Attributes
    ----------
    message : str
        Human-readable explanation.
    status  : int | None
        HTTP status code, if available.
    url     : str | None
        Requested URL, useful for logs.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.url = url

    # Nice string representation for logging
    def __str__(self) -> str:
        parts: list[str] = [self.message]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.url:
            parts.append(f"url={self.url}")
        return " | ".join(parts)


# -------------------------------------------------------------------------
# Concrete error classes, one per wrapper
# -------------------------------------------------------------------------
class OllamaAPIError(APIError):
    """Errors specific to the Ollama chat wrapper."""


class WebSearchError(APIError):
    """Errors specific to the web search wrapper."""


# -------------------------------------------------------------------------
# Agent-side errors
# -------------------------------------------------------------------------
class ToolExecutionError(Exception):
    """A tool requested by the model could not produce a result."""


class PythonInvokerError(ToolExecutionError):
    """The python_invoker tool failed to start or exited with an error."""


class ChatError(Exception):
    """The chat loop could not produce a final answer."""
