"""Turn lookup outcomes into the reply the bot posts."""
from __future__ import annotations

from .models import AggregateOutcome, OutcomeState, Reply

DEFAULT_EMPTY_PROMPT = "Please provide a keyword to search for."
DEFAULT_NO_RESULT_REACTION = "❌"


def prompt_reply(prompt: str = DEFAULT_EMPTY_PROMPT) -> Reply:
    return Reply.text(prompt)


def _join_errors(outcome: AggregateOutcome) -> str:
    return ", ".join(str(error) for error in outcome.errors)


def format_reply(
    outcome: AggregateOutcome,
    *,
    no_result_reaction: str = DEFAULT_NO_RESULT_REACTION,
) -> Reply:
    """Pick the reply for a finished lookup.

    Results win over errors; errors are appended as a warning when some
    sources still answered. With neither, the bot only reacts.
    """

    state = outcome.state
    if state is OutcomeState.FOUND:
        count = len(outcome.results)
        noun = "result" if count == 1 else "results"
        message = (
            f'Found {count} {noun} for "{outcome.keyword}":\n'
            + "\n".join(outcome.results)
        )
        if outcome.errors:
            message += f"\n\n⚠️ Some sources had issues: {_join_errors(outcome)}"
        return Reply.text(message)
    if state is OutcomeState.FAILED:
        return Reply.text(f"Could not search any sources. Errors: {_join_errors(outcome)}")
    return Reply.reaction(no_result_reaction)


__all__ = ["DEFAULT_EMPTY_PROMPT", "DEFAULT_NO_RESULT_REACTION", "format_reply", "prompt_reply"]
