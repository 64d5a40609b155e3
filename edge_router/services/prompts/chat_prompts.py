"""
Prompts for the chat, translate and summarize endpoints.
"""

CHAT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. Please answer in {language}."
)

TRANSLATE_PROMPT = (
    "Translate the following text to {target_language}. "
    "Return only the translation, without any explanation:\n\n{text}"
)

SUMMARIZE_PROMPT = (
    "Produce a concise summary of the following text. "
    "Answer in {language}:\n\n{text}"
)


def build_chat_system_prompt(language: str) -> str:
    return CHAT_SYSTEM_PROMPT.format(language=language)


def build_translate_prompt(text: str, target_language: str) -> str:
    return TRANSLATE_PROMPT.format(target_language=target_language, text=text)


def build_summarize_prompt(text: str, language: str) -> str:
    return SUMMARIZE_PROMPT.format(language=language, text=text)
