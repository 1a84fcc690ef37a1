"""
Advice provider.

Formats a prompt for a record, asks the chat-completion API and returns the
reply text. Failures never reach the caller: each one maps to a fixed
fallback message and sets `error_message`.

In-flight requests are tracked by string task id so callers can show one
spinner per record. Nothing is queued, cancelled or de-duplicated: asking
twice for the same record starts two exchanges.
"""

import logging
import uuid

from goatherd.advisor import prompts
from goatherd.advisor.client import chat_completion_with_retry
from goatherd.core.errors import (
    AdvisorError,
    ChatAPIError,
    ChatResponseError,
    RetryableError,
)
from goatherd.data.equipment import Equipment
from goatherd.data.goats import Goat, MilkRecord
from goatherd.data.pastures import Pasture

logger = logging.getLogger(__name__)

NOT_CONFIGURED_FALLBACK = "Error: Could not connect to AI service"
API_ERROR_FALLBACK = "Sorry, I'm unable to provide advice right now. Please try again later."
NETWORK_FALLBACK = (
    "I'm having trouble connecting right now. Here's some general advice: "
    "Ensure your goats have access to fresh water, quality hay, and regular health check-ups. "
    "Monitor their behavior daily for any changes."
)
NO_RESPONSE_FALLBACK = "Unable to get AI response at this time."

GENERAL_TASK_ID = "general-question"

SAMPLE_QUESTIONS = [
    "How to treat hoof rot naturally?",
    "Best feed supplements for lactating does?",
    "Signs of pregnancy in goats?",
    "How to prevent parasites in goats?",
    "What causes low milk production?",
    "How to handle aggressive goats?",
    "Best breeding age for does?",
    "Natural remedies for goat coughs?",
]


def task_id(kind: str, record_id: uuid.UUID) -> str:
    """Task id for one advice kind and record, e.g. "profile-<uuid>"."""
    return f"{kind}-{record_id}"


class AdviceProvider:
    def __init__(self):
        self.loading_tasks: set[str] = set()
        self.last_response = ""
        self.error_message = ""

    @property
    def is_loading(self) -> bool:
        return bool(self.loading_tasks)

    # -------------------------------------------------------------------------
    # Advice requests
    # -------------------------------------------------------------------------

    async def generate_goat_profile_summary(self, goat: Goat) -> str:
        system, prompt = prompts.goat_profile_prompt(goat)
        return await self.request(prompt, system, task_id("profile", goat.id))

    async def generate_feeding_plan(self, goat: Goat) -> str:
        system, prompt = prompts.feeding_plan_prompt(goat)
        return await self.request(prompt, system, task_id("feeding", goat.id))

    async def generate_breeding_tips(self, goat: Goat) -> str:
        system, prompt = prompts.breeding_tips_prompt(goat)
        return await self.request(prompt, system, task_id("breeding", goat.id))

    async def analyze_health_symptoms(self, symptoms: str, goat: Goat) -> str:
        system, prompt = prompts.health_symptoms_prompt(symptoms, goat)
        return await self.request(prompt, system, task_id("health", goat.id))

    async def interpret_milk_yield_trends(self, records: list[MilkRecord], goat: Goat) -> str:
        system, prompt = prompts.milk_yield_prompt(records, goat)
        return await self.request(prompt, system, task_id("milk", goat.id))

    async def generate_pasture_management_advice(self, pasture: Pasture) -> str:
        system, prompt = prompts.pasture_prompt(pasture)
        return await self.request(prompt, system, task_id("pasture", pasture.id))

    async def generate_equipment_maintenance_tips(self, equipment: Equipment) -> str:
        system, prompt = prompts.equipment_prompt(equipment)
        return await self.request(prompt, system, task_id("equipment", equipment.id))

    async def answer_general_question(self, question: str) -> str:
        system, prompt = prompts.general_question_prompt(question)
        return await self.request(prompt, system, GENERAL_TASK_ID)

    # -------------------------------------------------------------------------
    # Loading state helpers
    # -------------------------------------------------------------------------

    def is_loading_task(self, task: str) -> bool:
        return task in self.loading_tasks

    def is_loading_goat_profile(self, goat: Goat) -> bool:
        return self.is_loading_task(task_id("profile", goat.id))

    def is_loading_feeding_plan(self, goat: Goat) -> bool:
        return self.is_loading_task(task_id("feeding", goat.id))

    def is_loading_breeding_tips(self, goat: Goat) -> bool:
        return self.is_loading_task(task_id("breeding", goat.id))

    def is_loading_health_analysis(self, goat: Goat) -> bool:
        return self.is_loading_task(task_id("health", goat.id))

    def is_loading_yield_analysis(self, goat: Goat) -> bool:
        return self.is_loading_task(task_id("milk", goat.id))

    def is_loading_pasture_advice(self, pasture: Pasture) -> bool:
        return self.is_loading_task(task_id("pasture", pasture.id))

    def is_loading_maintenance_tips(self, equipment: Equipment) -> bool:
        return self.is_loading_task(task_id("equipment", equipment.id))

    # -------------------------------------------------------------------------
    # Request
    # -------------------------------------------------------------------------

    async def request(self, prompt: str, system_message: str, task: str | None = None) -> str:
        """Run one advice exchange and return the reply or a fallback message."""
        task = task or str(uuid.uuid4())
        self.loading_tasks.add(task)
        self.error_message = ""

        try:
            reply = await chat_completion_with_retry(prompt, system_message)
        except ChatResponseError as e:
            logger.warning("Advice %s: unusable response: %s", task, e)
            return NO_RESPONSE_FALLBACK
        except ChatAPIError as e:
            logger.warning("Advice %s: API error %s", task, e.status_code)
            self.error_message = f"API Error: {e.status_code}"
            return API_ERROR_FALLBACK
        except RetryableError as e:
            if e.status_code is not None:
                logger.warning("Advice %s: API error %s", task, e.status_code)
                self.error_message = f"API Error: {e.status_code}"
                return API_ERROR_FALLBACK
            logger.warning("Advice %s: network error: %s", task, e)
            self.error_message = f"Network error: {e}"
            return NETWORK_FALLBACK
        except AdvisorError as e:
            logger.warning("Advice %s: %s", task, e)
            self.error_message = "AI service is not configured"
            return NOT_CONFIGURED_FALLBACK
        finally:
            self.loading_tasks.discard(task)

        self.last_response = reply
        return reply


class ChatSession:
    """Question/answer history for the general farm advisor."""

    def __init__(self, provider: AdviceProvider | None = None):
        self.provider = provider or AdviceProvider()
        self.history: list[dict] = []

    async def ask(self, question: str) -> str:
        question = question.strip()
        if not question:
            raise ValueError("Question cannot be empty")

        self.history.append({"role": "user", "content": question})
        answer = await self.provider.answer_general_question(question)
        self.history.append({"role": "assistant", "content": answer})
        return answer
