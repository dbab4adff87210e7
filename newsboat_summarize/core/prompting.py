DEFAULT_PROMPT = (
    "Summarize the following content in 5-10 concise bullet points. "
    "If it is a video transcript with timestamps, include the relevant timestamps. "
    "If useful, do a web search for insights that corroborate or challenge the key "
    "points, and cite source URLs only when you actually used them."
)


def select_prompt(custom_prompt: str | None) -> str:
    if custom_prompt:
        return custom_prompt
    return DEFAULT_PROMPT


def build_prompt(prompt: str, content: str) -> str:
    return f"{prompt}\n\n{content}"
