"""Tests for advisor prompt templates."""

from datetime import datetime

from goatherd.advisor import prompts
from goatherd.data.equipment import Equipment, EquipmentType
from goatherd.data.goats import MilkRecord


def test_goat_profile_prompt(doe):
    system, prompt = prompts.goat_profile_prompt(doe)
    assert system == prompts.PROFILE_SYSTEM
    assert "Name: Bella" in prompt
    assert "Health Status: Healthy" in prompt
    assert "Temperament: Gentle and friendly" in prompt


def test_health_prompt_lists_details_and_symptoms(doe):
    system, prompt = prompts.health_symptoms_prompt("limping on front left leg", doe)
    assert system == prompts.HEALTH_SYSTEM
    assert "- Breed: Nubian" in prompt
    assert "Health Status" not in prompt
    assert "Symptoms: limping on front left leg" in prompt


def test_milk_prompt_average(doe):
    records = [
        MilkRecord(date=datetime(2024, 5, 1), quantity=2.0),
        MilkRecord(date=datetime(2024, 5, 2), quantity=1.5),
    ]
    _, prompt = prompts.milk_yield_prompt(records, doe)
    assert "Total records: 2" in prompt
    assert "Average daily yield: 1.75 liters" in prompt


def test_milk_prompt_without_records(doe):
    _, prompt = prompts.milk_yield_prompt([], doe)
    assert "Average daily yield: 0.00 liters" in prompt


def test_pasture_prompt(pasture):
    system, prompt = prompts.pasture_prompt(pasture)
    assert system == prompts.PASTURE_SYSTEM
    assert "Size: 2.5 acres" in prompt
    assert "Rest Period: 30 days" in prompt


def test_equipment_prompt():
    item = Equipment(name="Hay Rack", type=EquipmentType.FEEDER, location="Barn")
    _, prompt = prompts.equipment_prompt(item)
    assert "Name: Hay Rack" in prompt
    assert "Location: Barn" in prompt


def test_general_question_is_passed_through():
    system, prompt = prompts.general_question_prompt("Natural remedies for goat coughs?")
    assert system == prompts.GENERAL_SYSTEM
    assert prompt == "Natural remedies for goat coughs?"
