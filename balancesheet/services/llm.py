import logging
from typing import Optional

import httpx

from balancesheet.core import config

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a financial advisor AI assistant. Your role is to provide personalized financial advice "
    "based on the user's financial data. Always give specific, actionable advice that relates to the "
    "user's actual financial situation. If the user asks a general question, still try to relate it "
    "to their specific financial data when possible."
)

FALLBACK_REPLY = "I apologize, but I encountered an error generating a response."


class LLMServiceError(Exception):
    pass


def build_user_prompt(message: str, financial_context: str) -> str:
    return (
        f"Here is my financial data:\n\n{financial_context}\n\n"
        f"My question is: {message}\n\n"
        "Please provide personalized advice based on my financial situation."
    )


async def request_completion(
    message: str,
    financial_context: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    if not config.OPENROUTER_API_KEY:
        raise LLMServiceError("OPENROUTER_API_KEY is not configured")

    body = {
        "model": config.OPENROUTER_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(message, financial_context)},
        ],
        "temperature": 0.7,
        "max_tokens": 500,
    }
    headers = {
        "Authorization": f"Bearer {config.OPENROUTER_API_KEY}",
        "HTTP-Referer": config.OPENROUTER_REFERER,
        "X-Title": "Balance Sheet Tracker",
    }

    try:
        async with httpx.AsyncClient(timeout=60, transport=transport) as client:
            r = await client.post(config.OPENROUTER_URL, json=body, headers=headers)
    except httpx.HTTPError as exc:
        raise LLMServiceError(f"Completion request failed: {exc}") from exc

    if r.is_error:
        logger.error("Completion API error %s: %s", r.status_code, r.text)
        raise LLMServiceError(f"API error: {r.status_code}")

    try:
        data = r.json()
    except ValueError as exc:
        raise LLMServiceError("Completion API returned invalid JSON") from exc
    if not isinstance(data, dict):
        raise LLMServiceError("Completion API returned an unexpected payload")

    choices = data.get("choices")
    message = None
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        message = choices[0].get("message")
    if isinstance(message, dict):
        return (message.get("content") or FALLBACK_REPLY).strip()
    return FALLBACK_REPLY
