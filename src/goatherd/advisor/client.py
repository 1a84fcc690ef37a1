"""Chat-completion API client - core functions only."""

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from goatherd.core.config import settings
from goatherd.core.errors import (
    AdvisorError,
    ChatAPIError,
    ChatResponseError,
    RetryableError,
)

# =============================================================================
# Retry Configuration
# =============================================================================

MIN_WAIT_SECONDS = 1
MAX_WAIT_SECONDS = 10


# =============================================================================
# Client Functions
# =============================================================================


def build_payload(prompt: str, system_message: str) -> dict:
    """Request body for one system + user exchange."""
    return {
        "model": settings.chat_model,
        "messages": [
            {"role": "system", "content": system_message},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": settings.chat_max_tokens,
        "temperature": settings.chat_temperature,
    }


def extract_content(result: dict) -> str:
    """Pull choices[0].message.content out of a completion response."""
    try:
        content = result["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ChatResponseError(f"Unexpected completion response: {e!r}") from e
    if not isinstance(content, str):
        raise ChatResponseError("Completion content is not text")
    return content.strip()


async def _post_completion(client: httpx.AsyncClient, prompt: str, system_message: str) -> httpx.Response:
    return await client.post(
        settings.chat_api_url,
        headers={
            "Authorization": f"Bearer {settings.openai_api_key}",
            "Content-Type": "application/json",
        },
        json=build_payload(prompt, system_message),
        timeout=settings.chat_timeout,
    )


async def chat_completion(prompt: str, system_message: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Ask the chat-completion endpoint for one reply.

    This is the low-level function that makes a single request without retry.

    Args:
        prompt: User message
        system_message: System instruction for the assistant
        client: Open client to reuse; a short-lived one is created when omitted

    Returns:
        The first choice's message content, whitespace-trimmed

    Raises:
        AdvisorError: If no API key is configured
        RetryableError: On timeouts, connection failures and 5xx responses
        ChatAPIError: On any other non-2xx response
        ChatResponseError: If the response has no message content
    """
    if not settings.openai_api_key:
        raise AdvisorError("No API key configured (set OPENAI_API_KEY)")

    try:
        if client is not None:
            response = await _post_completion(client, prompt, system_message)
        else:
            async with httpx.AsyncClient() as owned:
                response = await _post_completion(owned, prompt, system_message)
    except httpx.TimeoutException as e:
        raise RetryableError(f"Request timed out: {e}") from e
    except httpx.TransportError as e:
        raise RetryableError(f"Connection failed: {e}") from e

    if response.status_code >= 500:
        raise RetryableError(f"HTTP {response.status_code}: {response.text}", status_code=response.status_code)
    if not response.is_success:
        raise ChatAPIError(response.status_code, response.text)

    try:
        result = response.json()
    except ValueError as e:
        raise ChatResponseError(f"Response is not JSON: {e}") from e

    return extract_content(result)


async def chat_completion_with_retry(prompt: str, system_message: str) -> str:
    """Ask for a reply, retrying transient failures.

    Retries on timeouts, connection errors and HTTP 5xx, up to
    settings.chat_max_attempts attempts in total. With the default of one
    attempt this is a single exchange.
    """
    async for attempt in AsyncRetrying(
        retry=retry_if_exception_type(RetryableError),
        stop=stop_after_attempt(max(1, settings.chat_max_attempts)),
        wait=wait_exponential_jitter(initial=MIN_WAIT_SECONDS, max=MAX_WAIT_SECONDS, jitter=2),
        reraise=True,
    ):
        with attempt:
            return await chat_completion(prompt, system_message)
    raise AdvisorError("No attempt was made")  # unreachable with stop >= 1
