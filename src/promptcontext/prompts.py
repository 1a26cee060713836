"""Localised context hints for prompts sent to a language model."""

from __future__ import annotations

from promptcontext.context import PromptContext
from promptcontext.lang import get_dictionary


def build_context_hint(context: PromptContext, language: str = "en") -> str:
    """Describe an extracted context in the prompt's language.

    Args:
        context: Context extracted from the prompt.
        language: Language tag whose message templates are used.

    Returns:
        One or more short sentences, e.g.
        ``"The request mentions: comparison, last. Time period: week."``

    Raises:
        UnsupportedLanguageError: If ``language`` has no dictionary.
    """
    dictionary = get_dictionary(language)
    messages = dictionary.messages

    if context.is_empty:
        return messages["context-empty"]

    parts = []
    if context.keys:
        names = [dictionary.key_names.get(key.value, key.value) for key in context.keys]
        parts.append(messages["context-keys"].format(keys=", ".join(names)))

    if context.period is not None:
        period = dictionary.period_names.get(context.period.value, context.period.value)
        parts.append(messages["context-period"].format(period=period))

    if context.amount is not None:
        parts.append(messages["context-amount"].format(amount=context.amount))

    return " ".join(parts)
