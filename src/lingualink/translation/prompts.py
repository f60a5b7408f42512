"""
Prompt templates for the completion API.
"""


def build_translation_prompt(text: str, source_language: str, target_language: str) -> str:
    return (
        f"Translate the following text from {source_language} to {target_language}. \n"
        "    Provide only the translation, maintaining the original tone and context:\n\n"
        f'    "{text}"'
    )


def build_detection_prompt(text: str) -> str:
    return (
        "Detect the language of the following text and respond with only the language "
        'name in English (e.g., "English", "Spanish", "French"):\n\n'
        f'    "{text}"'
    )


def build_context_prompt(
    text: str, source_language: str, target_language: str, context: str | None = None
) -> str:
    prompt = f"Translate the following text from {source_language} to {target_language}. "
    if context:
        prompt += f"Context: {context}. "
    prompt += (
        "Provide the best translation maintaining the original tone and meaning:\n\n"
        f'    "{text}"'
    )
    return prompt


def build_alternatives_prompt(text: str, source_language: str, target_language: str) -> str:
    return (
        f'Provide 2-3 alternative translations of "{text}" from {source_language} '
        f"to {target_language}. \n"
        "    List them separated by newlines, without numbering:"
    )


def parse_alternatives(content: str, limit: int = 3) -> list[str]:
    """Split a newline-separated completion into at most ``limit`` alternatives."""
    alternatives = [line.strip() for line in content.strip().split("\n")]
    return [alt for alt in alternatives if alt][:limit]


def clean_language_name(content: str) -> str:
    """Strip whitespace, quotes and a trailing period from a detection answer."""
    return content.strip().strip("\"'").rstrip(".").strip()
