"""Prompt templates for commit message generation, keyed by language.

Local models follow short, example-driven prompts far better than long
instructions, so each template asks for a 3-5 word message, shows good
examples and names the phrases the model must not produce.
"""

from commitgenius.locales import FALLBACK_LANGUAGE


PROMPT_TEMPLATES = {
    "en": """Git diff:
{diff}

Create SHORT English commit message (3-5 words):

Examples: "Add test function", "Fix auth bug", "Update README", "Remove unused code"
DO NOT write: "Here is", "The commit message", explanations

Answer:""",
    "vi": """Git diff:
{diff}

Tạo commit message bằng tiếng Việt (chỉ 3-5 từ):

Ví dụ đúng: "Thêm test function", "Sửa lỗi auth", "Cập nhật README"
KHÔNG viết: "Đây là commit message" hoặc giải thích dài

Trả lời:""",
}

DEFAULT_MAX_DIFF_CHARS = 50000


def truncate_diff(diff: str, max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Truncate the diff to max_chars, marking the cut."""
    if len(diff) > max_chars:
        return diff[:max_chars] + "\n...[truncated]\n"
    return diff


def build_prompt(diff: str, language: str = FALLBACK_LANGUAGE, max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Build the generation prompt for a diff.

    Args:
        diff: The staged diff.
        language: Language code; unknown languages fall back to English.
        max_diff_chars: Maximum characters of diff embedded in the prompt.

    Returns:
        The formatted prompt.
    """
    template = PROMPT_TEMPLATES.get(language, PROMPT_TEMPLATES[FALLBACK_LANGUAGE])
    return template.format(diff=truncate_diff(diff, max_diff_chars))
