"""
speechscore.llm.templates - Prompt template loading and rendering.

Prompts are Jinja2 templates shipped in speechscore/prompts/. Long
transcripts are cut to a character budget before rendering so a single
rambling answer cannot blow the model's context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"
MAX_TRANSCRIPT_CHARS = 8000
TRUNCATION_MARKER = " [...]"


def format_transcript_for_prompt(text: str, max_chars: int = MAX_TRANSCRIPT_CHARS) -> str:
    """Trim a cleaned transcript to max_chars, cutting at a word boundary.

    Args:
        text: Cleaned transcript
        max_chars: Character budget for the transcript

    Returns:
        The transcript, or its leading words followed by " [...]"
    """
    text = text.strip()
    if len(text) <= max_chars:
        return text
    cut = text[:max_chars]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut + TRUNCATION_MARKER


class PromptTemplateManager:
    """Loads and renders prompt templates by file name."""

    def __init__(self, prompts_dir: Path = PROMPTS_DIR) -> None:
        self.prompts_dir = prompts_dir
        self.env = Environment(
            loader=FileSystemLoader(str(prompts_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._cache: dict[str, Template] = {}

    def get_template(self, name: str) -> Template:
        """Load a template by name, e.g. "enrich.txt".

        Raises:
            FileNotFoundError: If the template doesn't exist
        """
        if name not in self._cache:
            template_path = self.prompts_dir / name
            if not template_path.exists():
                raise FileNotFoundError(f"Template not found: {template_path}")
            self._cache[name] = self.env.get_template(name)
        return self._cache[name]

    def render(self, template_name: str, variables: dict[str, Any]) -> str:
        return self.get_template(template_name).render(**variables)

    def list_templates(self) -> list[str]:
        if not self.prompts_dir.exists():
            return []
        return sorted(f.name for f in self.prompts_dir.glob("*.txt"))
