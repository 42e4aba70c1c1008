from pathlib import Path

from app.summarization.exceptions import SummarizationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the summarization prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled summarization_prompt.txt.

    Returns:
        The raw template string with a ``{text}`` placeholder.

    Raises:
        SummarizationError: if the file cannot be read or lacks the placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "summarization_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8").rstrip()
    except OSError as exc:
        raise SummarizationError(f"Failed to load prompt template: {exc}") from exc
    if "{text}" not in template:
        raise SummarizationError(f"Prompt template {path} has no {{text}} placeholder")
    return template
