from .chat_prompts import (
    CHAT_SYSTEM_PROMPT,
    TRANSLATE_PROMPT,
    SUMMARIZE_PROMPT,
    build_chat_system_prompt,
    build_translate_prompt,
    build_summarize_prompt,
)

__all__ = [
    "CHAT_SYSTEM_PROMPT",
    "TRANSLATE_PROMPT",
    "SUMMARIZE_PROMPT",
    "build_chat_system_prompt",
    "build_translate_prompt",
    "build_summarize_prompt",
]
