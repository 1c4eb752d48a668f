"""CLI command for generating a commit message from staged changes."""

from typing import Optional

import typer

from commitgenius import config
from commitgenius.formatters import FormatOptions
from commitgenius.git import (
    GitError,
    NoStagedChangesError,
    commit,
    get_staged_diff,
    get_staged_files,
    has_staged_changes,
    is_git_repository,
)
from commitgenius.llm import LLMError, get_provider, select_model
from commitgenius.locales import SUPPORTED_LANGUAGES, get_message
from commitgenius.cli.utils import display_debug_info, display_message, edit_message

ACTIONS = {
    "c": "commit",
    "commit": "commit",
    "e": "edit",
    "edit": "edit",
    "r": "regenerate",
    "regenerate": "regenerate",
    "q": "quit",
    "quit": "quit",
}


def _prompt_action(language: str) -> str:
    """Ask what to do with the generated message until a valid answer is given."""
    while True:
        answer = typer.prompt(
            get_message("action_prompt", language=language),
            default="c",
            show_default=False,
        )
        action = ACTIONS.get(answer.strip().lower())
        if action:
            return action
        typer.echo(get_message("invalid_choice", answer, language=language), err=True)


def _commit(message: str, success_key: str, language: str) -> None:
    output = commit(message)
    typer.echo(get_message(success_key, language=language))
    if output:
        typer.echo(output)


def generate_command(
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Ollama model to use",
    ),
    temperature: Optional[float] = typer.Option(
        None,
        "--temperature",
        "-t",
        min=0.0,
        max=1.0,
        help="Temperature for generation (0.0-1.0)",
    ),
    auto_commit: bool = typer.Option(
        False,
        "--commit",
        "-c",
        help="Automatically commit with the generated message",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        "-p",
        help="Just preview the diff without generating a message",
    ),
    conventional: bool = typer.Option(
        False,
        "--conventional",
        "-v",
        help="Use conventional commit format",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language for the commit message (en, vi)",
    ),
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Conventional commit type (feat, fix, docs, etc.); inferred from the diff if omitted",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        help="Scope for conventional commit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the raw model response and diff statistics",
    ),
) -> None:
    """Generate a commit message based on staged changes."""
    config.load_config()

    lang = (language or config.LANGUAGE).lower()
    if lang not in SUPPORTED_LANGUAGES:
        typer.echo(f"Invalid language: {language}", err=True)
        typer.echo(f"Valid languages: {', '.join(SUPPORTED_LANGUAGES)}", err=True)
        raise typer.Exit(1)

    if not is_git_repository():
        typer.echo(get_message("not_git_repository", language=lang), err=True)
        raise typer.Exit(1)

    try:
        if not has_staged_changes():
            raise NoStagedChangesError(get_message("no_staged_changes", language=lang))

        typer.echo(get_message("staged_files", language=lang))
        for staged_file in get_staged_files():
            typer.echo(f"  • {staged_file}")
        typer.echo("")

        diff = get_staged_diff()

        if preview:
            typer.echo(get_message("staged_changes", language=lang))
            typer.echo(diff)
            return

        provider = get_provider(temperature=temperature)

        typer.echo(get_message("checking_ollama", language=lang), err=True)
        if not provider.is_available():
            typer.echo(get_message("ollama_not_available", language=lang), err=True)
            raise typer.Exit(1)
        typer.echo(get_message("ollama_available", language=lang), err=True)

        try:
            available_models = provider.list_models()
        except LLMError as e:
            typer.echo(get_message("error_checking_models", e, language=lang), err=True)
            raise typer.Exit(1)
        if not available_models:
            typer.echo(get_message("no_models_found", language=lang), err=True)
            typer.echo(f"  ollama pull {config.DEFAULT_MODEL} " + get_message("or_another_model", language=lang), err=True)
            raise typer.Exit(1)

        requested_model = model or config.ACTIVE_MODEL
        provider.model = select_model(requested_model, available_models)
        if provider.model != requested_model:
            typer.echo(get_message("model_not_found", requested_model, provider.model, language=lang), err=True)

        options = FormatOptions(
            use_conventional=conventional or config.USE_CONVENTIONAL,
            commit_type=commit_type,
            scope=scope,
            max_subject_length=config.MAX_SUBJECT_LENGTH,
        )

        while True:
            typer.echo(get_message("generating", provider.model, language=lang), err=True)
            result = provider.generate(diff, language=lang, options=options)
            message = result.message

            if debug:
                display_debug_info(result, diff)

            display_message(message, get_message("generated_commit_message", language=lang))

            if not message.strip():
                typer.echo(get_message("empty_message", language=lang), err=True)
                if auto_commit:
                    raise typer.Exit(1)

            if auto_commit:
                _commit(message, "committed", lang)
                return

            action = _prompt_action(lang)

            if action == "commit":
                if message.strip():
                    _commit(message, "committed", lang)
                else:
                    typer.echo(get_message("commit_cancelled_empty", language=lang), err=True)
            elif action == "edit":
                edited = edit_message(message)
                if edited:
                    _commit(edited, "committed_edited", lang)
                else:
                    typer.echo(get_message("commit_cancelled_empty", language=lang), err=True)
            elif action == "regenerate":
                continue
            else:
                typer.echo(get_message("commit_cancelled", language=lang), err=True)
            return

    except NoStagedChangesError:
        typer.echo(get_message("no_staged_changes", language=lang), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
