"""Prompt templates for the chat model."""

from __future__ import annotations

from aura_orchestrator.booking.domains import BOOKING_SIGILS, IMAGE_GENERATION_SIGIL, DomainTag

_SIGIL_LINES = "\n".join(
    f"- {sigil}: the user wants a {domain.value.replace('_', ' ')} action"
    for sigil, domain in BOOKING_SIGILS.items()
)


def system_prompt(assistant_name: str, file_context: str = "") -> str:
    prompt = (
        f"You are {assistant_name}, a Universal Reasoning Agent. You help people think "
        "through complex problems, manage tasks and understand the world around them.\n\n"
        "Answer conversationally unless one of these rules applies:\n"
        f"1. If the user asks for an image to be created or drawn, reply with exactly "
        f"'{IMAGE_GENERATION_SIGIL}' followed by a detailed image prompt and nothing else.\n"
        "2. If the user wants to order, book, reserve or review bookings, reply with exactly "
        "one of these markers and nothing else:\n"
        f"{_SIGIL_LINES}\n"
    )
    if file_context:
        prompt += (
            "\nThe user has shared these files. Use them when they are relevant:\n\n"
            f"{file_context}\n"
        )
    return prompt


_DOMAINS = ", ".join(domain.value for domain in DomainTag)

AGENTIC_ACTION_PROMPT = (
    "Turn the user's request into a booking action. Reply with a JSON object with the "
    "keys: \"domain\" (one of: " + _DOMAINS + "), \"action\" (a short verb phrase such as "
    "\"place_order\", \"book\", \"list_bookings\" or \"show_menu\"), \"parameters\" (an "
    "object with every detail you can extract: items, quantities, dates, times, places, "
    "party size) and \"summary\" (one sentence). If the request is not a booking, reply "
    "with {\"domain\": null}."
)

TASK_SUGGESTION_PROMPT = (
    "Suggest up to {limit} short, actionable follow-up tasks that would help the user "
    "with what they just said. Reply with a JSON object {{\"tasks\": [\"...\"]}}. Reply with "
    "{{\"tasks\": []}} when no follow-up is useful."
)
