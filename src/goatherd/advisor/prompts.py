"""Prompt templates for the farm advisor.

Each builder returns a (system_message, prompt) pair for one advice kind.
"""

from goatherd.data.equipment import Equipment
from goatherd.data.goats import Goat, MilkRecord
from goatherd.data.pastures import Pasture

PROFILE_SYSTEM = "You are a helpful goat farming assistant. Provide concise, friendly summaries."
FEEDING_SYSTEM = "You are an expert in goat nutrition. Provide practical feeding advice."
BREEDING_SYSTEM = "You are a goat breeding expert. Provide helpful breeding guidance."
HEALTH_SYSTEM = (
    "You are a veterinary assistant specializing in goat health. Provide helpful but not diagnostic advice."
)
MILK_SYSTEM = "You are a dairy goat specialist. Provide insights on milk production optimization."
PASTURE_SYSTEM = "You are a pasture management expert. Provide practical grazing advice."
EQUIPMENT_SYSTEM = "You are a farm equipment specialist. Provide practical maintenance advice."
GENERAL_SYSTEM = (
    "You are a knowledgeable goat farming advisor. "
    "Provide helpful, practical advice for small-scale goat farmers."
)


def _goat_lines(goat: Goat, *, health: bool = True) -> str:
    lines = [
        f"Name: {goat.name}",
        f"Breed: {goat.breed}",
        f"Age: {goat.age} years",
        f"Sex: {goat.sex.value}",
    ]
    if health:
        lines.append(f"Health Status: {goat.health_status.value}")
    return "\n".join(lines)


def goat_profile_prompt(goat: Goat) -> tuple[str, str]:
    prompt = (
        "Generate a brief, friendly summary for this goat profile:\n"
        f"{_goat_lines(goat)}\n"
        f"Temperament: {goat.temperament_notes}\n"
        "\n"
        "Please provide 2-3 sentences highlighting the goat's key characteristics and any notable traits."
    )
    return PROFILE_SYSTEM, prompt


def feeding_plan_prompt(goat: Goat) -> tuple[str, str]:
    prompt = (
        "Suggest an optimized feeding plan for this goat:\n"
        f"{_goat_lines(goat)}\n"
        "\n"
        "Please provide specific recommendations for feed types, quantities, and feeding schedule."
    )
    return FEEDING_SYSTEM, prompt


def breeding_tips_prompt(goat: Goat) -> tuple[str, str]:
    prompt = (
        "Provide breeding tips and best practices for this goat:\n"
        f"{_goat_lines(goat)}\n"
        "\n"
        "Include timing recommendations, health considerations, and breeding best practices."
    )
    return BREEDING_SYSTEM, prompt


def health_symptoms_prompt(symptoms: str, goat: Goat) -> tuple[str, str]:
    details = "\n".join(f"- {line}" for line in _goat_lines(goat, health=False).splitlines())
    prompt = (
        "Analyze these health symptoms for a goat and suggest treatments:\n"
        "Goat Details:\n"
        f"{details}\n"
        "\n"
        f"Symptoms: {symptoms}\n"
        "\n"
        "Please provide possible causes, recommended treatments, and when to consult a veterinarian."
    )
    return HEALTH_SYSTEM, prompt


def milk_yield_prompt(records: list[MilkRecord], goat: Goat) -> tuple[str, str]:
    total = sum(r.quantity for r in records)
    average = total / len(records) if records else 0.0
    prompt = (
        "Interpret milk yield trends for this goat:\n"
        f"Goat: {goat.name} ({goat.breed}, {goat.age} years old)\n"
        f"Total records: {len(records)}\n"
        f"Average daily yield: {average:.2f} liters\n"
        "\n"
        "Recent yield data shows variations. Please analyze potential causes for yield changes "
        "and suggest improvements for milk production."
    )
    return MILK_SYSTEM, prompt


def pasture_prompt(pasture: Pasture) -> tuple[str, str]:
    prompt = (
        "Provide pasture management advice for this field:\n"
        f"Name: {pasture.name}\n"
        f"Size: {pasture.size} acres\n"
        f"Grass Type: {pasture.grass_type.value}\n"
        f"Condition: {pasture.condition.value}\n"
        f"Capacity: {pasture.capacity} goats\n"
        f"Current Occupancy: {pasture.current_occupancy} goats\n"
        f"Rest Period: {pasture.rest_period} days\n"
        "\n"
        "Please suggest optimal grazing strategies, rest periods, and pasture improvement techniques."
    )
    return PASTURE_SYSTEM, prompt


def equipment_prompt(equipment: Equipment) -> tuple[str, str]:
    prompt = (
        "Provide maintenance tips for this farm equipment:\n"
        f"Name: {equipment.name}\n"
        f"Type: {equipment.type.value}\n"
        f"Condition: {equipment.condition.value}\n"
        f"Location: {equipment.location}\n"
        "\n"
        "Please suggest maintenance schedules, care tips, and upgrade recommendations if needed."
    )
    return EQUIPMENT_SYSTEM, prompt


def general_question_prompt(question: str) -> tuple[str, str]:
    return GENERAL_SYSTEM, question
