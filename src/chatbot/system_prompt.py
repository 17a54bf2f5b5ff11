from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."

_TEMPLATES_DIR = Path(__file__).parent / "prompts"
_env = Environment(
    loader=FileSystemLoader(_TEMPLATES_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def load_system_prompt(
    path: str | None = None, *, python_tool_enabled: bool = True
) -> str:
    """Return the base system prompt.

    A custom ``path`` is read verbatim; otherwise the bundled template is
    rendered. Any failure falls back to :data:`DEFAULT_SYSTEM_PROMPT`.
    """
    try:
        if path:
            return Path(path).read_text(encoding="utf-8").strip()
        template = _env.get_template("system_prompt.j2")
        return template.render(python_tool_enabled=python_tool_enabled).strip()
    except (OSError, TemplateError) as e:
        logger.error("Failed to read system prompt: %s. Using default prompt.", e)
        return DEFAULT_SYSTEM_PROMPT


def with_current_datetime(prompt: str, now: datetime | None = None) -> str:
    now = now or datetime.now().astimezone()
    return f"{prompt} Current date and time: {now.isoformat()}"
