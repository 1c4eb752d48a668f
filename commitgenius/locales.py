"""Localized user-facing messages for commitgenius.

Messages are plain data tables keyed by language code; adding a language
means adding a table, not touching the CLI.
"""

SUPPORTED_LANGUAGES = ("en", "vi")

FALLBACK_LANGUAGE = "en"

MESSAGES = {
    "en": {
        "not_git_repository": "Not a git repository. Run this command from within a git repo.",
        "no_staged_changes": "No staged changes found. Stage your changes first with: git add <file>...",
        "staged_files": "Staged files:",
        "staged_changes": "Staged changes:",
        "checking_ollama": "Checking Ollama service...",
        "ollama_available": "Ollama service is available.",
        "ollama_not_available": "Ollama service is not available. Make sure Ollama is running (ollama serve).",
        "no_models_found": "No models found in Ollama. Pull one first, for example:",
        "or_another_model": "(or any other model)",
        "error_checking_models": "Error checking models: {}",
        "model_not_found": "Model '{}' is not available, using '{}' instead.",
        "generating": "Generating commit message with {}...",
        "generated_commit_message": "Generated commit message:",
        "empty_message": "The model returned an empty commit message. Try regenerating.",
        "action_prompt": "What would you like to do? [c]ommit / [e]dit / [r]egenerate / [q]uit",
        "committed": "Changes committed successfully!",
        "committed_edited": "Changes committed successfully with edited message!",
        "commit_cancelled": "Commit cancelled.",
        "commit_cancelled_empty": "Commit cancelled: empty commit message.",
        "invalid_choice": "Invalid choice: {}",
    },
    "vi": {
        "not_git_repository": "Không phải là git repository. Hãy chạy lệnh này trong một git repo.",
        "no_staged_changes": "Không có thay đổi nào được stage. Hãy stage trước bằng: git add <file>...",
        "staged_files": "Các file đã stage:",
        "staged_changes": "Các thay đổi đã stage:",
        "checking_ollama": "Đang kiểm tra dịch vụ Ollama...",
        "ollama_available": "Dịch vụ Ollama đang hoạt động.",
        "ollama_not_available": "Dịch vụ Ollama không khả dụng. Hãy chắc chắn Ollama đang chạy (ollama serve).",
        "no_models_found": "Không tìm thấy model nào trong Ollama. Hãy tải một model, ví dụ:",
        "or_another_model": "(hoặc một model khác)",
        "error_checking_models": "Lỗi khi kiểm tra model: {}",
        "model_not_found": "Model '{}' không có sẵn, dùng '{}' thay thế.",
        "generating": "Đang tạo commit message với {}...",
        "generated_commit_message": "Commit message đã tạo:",
        "empty_message": "Model trả về commit message rỗng. Hãy thử tạo lại.",
        "action_prompt": "Bạn muốn làm gì? [c]ommit / [e]dit / [r]egenerate / [q]uit",
        "committed": "Đã commit thành công!",
        "committed_edited": "Đã commit thành công với message đã chỉnh sửa!",
        "commit_cancelled": "Đã hủy commit.",
        "commit_cancelled_empty": "Đã hủy commit: commit message rỗng.",
        "invalid_choice": "Lựa chọn không hợp lệ: {}",
    },
}


def get_message(key: str, *args, language: str = FALLBACK_LANGUAGE) -> str:
    """Get a localized message.

    Args:
        key: Message key.
        *args: Values substituted into the message's {} placeholders.
        language: Language code; unknown languages fall back to English.

    Returns:
        The formatted message, the English message if the key is missing
        in the requested language, or the key itself if missing everywhere.
    """
    table = MESSAGES.get(language, MESSAGES[FALLBACK_LANGUAGE])
    template = table.get(key) or MESSAGES[FALLBACK_LANGUAGE].get(key)
    if template is None:
        return key
    if args:
        return template.format(*args)
    return template
