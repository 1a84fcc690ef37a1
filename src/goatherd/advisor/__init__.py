"""Advisor - chat-completion advice for goats, pastures and equipment."""

from goatherd.advisor import prompts
from goatherd.advisor.client import chat_completion, chat_completion_with_retry
from goatherd.advisor.provider import (
    SAMPLE_QUESTIONS,
    AdviceProvider,
    ChatSession,
    task_id,
)

__all__ = [
    "prompts",
    "chat_completion",
    "chat_completion_with_retry",
    "AdviceProvider",
    "ChatSession",
    "SAMPLE_QUESTIONS",
    "task_id",
]
