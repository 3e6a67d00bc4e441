"""Prompt templating helpers."""
from __future__ import annotations

SYSTEM_PROMPT = """You are an expert content humanizer. Your task is to transform AI-generated text into natural, human-like content while preserving the original meaning and key information.

Guidelines:
- Add natural conversational elements and human touches
- Vary sentence structure and length
- Include subtle imperfections that humans naturally have
- Use more casual, relatable language where appropriate
- Add personal touches like "I think", "in my experience", etc.
- Make the tone warmer and more engaging
- Use more easy english words
- Ensure the content sounds like it was written by a real person
- Maintain the core message and facts
- Don't make it overly casual if the original was formal - just more human"""

USER_TEMPLATE = "Please humanize this AI-generated content:\n\n{{input}}"

def render_prompt(template: str, user_input: str) -> str:
    """
    Render user input into the template.

    Args:
        template: Template content containing {{input}}.
        user_input: Input string, inserted verbatim.

    Returns:
        Rendered prompt.
    """
    return template.replace("{{input}}", user_input)

def build_messages(system_prompt: str, user_template: str, text: str) -> list[dict[str, str]]:
    """Two-message conversation sent upstream: system guide, then the user's text."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": render_prompt(user_template, text)},
    ]
