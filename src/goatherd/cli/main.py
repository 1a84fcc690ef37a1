"""Command line interface for goat herd records and advice.

Usage:
    goatherd goats                      # List the herd
    goatherd goat add Daisy Saanen --age 2
    goatherd alerts                     # Health, maintenance and breeding reminders
    goatherd milk Bella                 # Yield totals and trend
    goatherd advise profile Bella       # Ask the advisor about a goat
    goatherd ask "Signs of pregnancy in goats?"
    goatherd check                      # Verify configuration
"""

import argparse
import asyncio
import json
import logging
import sys
import uuid
from pathlib import Path

from goatherd.advisor.provider import SAMPLE_QUESTIONS, AdviceProvider
from goatherd.analysis import breeding as breeding_analysis
from goatherd.analysis import equipment as equipment_analysis
from goatherd.analysis import feeding as feeding_analysis
from goatherd.analysis import milk as milk_analysis
from goatherd.analysis import pastures as pasture_analysis
from goatherd.analysis.health import health_alerts
from goatherd.cli import check
from goatherd.core.config import settings
from goatherd.core.errors import RecordNotFoundError
from goatherd.core.logging_config import setup_logging
from goatherd.core.units import format_area, format_feed, format_milk
from goatherd.data.goats import Goat, GoatSex, HealthStatus, validate_goat
from goatherd.data.store import FarmStore, JsonFileBackend

ADVICE_KINDS = ["profile", "feeding", "breeding", "milk", "pasture", "equipment"]


# =============================================================================
# Record lookup
# =============================================================================


def find_record(records: list, identifier: str, kind: str):
    """Find a record by full id, id prefix or (case-insensitive) name."""
    try:
        wanted = uuid.UUID(identifier)
    except ValueError:
        wanted = None

    for record in records:
        if wanted is not None and record.id == wanted:
            return record

    needle = identifier.lower()
    by_name = [r for r in records if getattr(r, "name", "").lower() == needle]
    if len(by_name) == 1:
        return by_name[0]

    by_prefix = [r for r in records if str(r.id).startswith(needle)]
    if len(by_prefix) == 1:
        return by_prefix[0]

    raise RecordNotFoundError(kind, identifier)


def short_id(record_id: uuid.UUID) -> str:
    return str(record_id)[:8]


# =============================================================================
# Commands
# =============================================================================


def print_goats(store: FarmStore, as_json: bool) -> None:
    if as_json:
        print(json.dumps([g.to_dict() for g in store.goats], indent=2, ensure_ascii=False))
        return
    for goat in store.goats:
        print(
            f"{short_id(goat.id)}  {goat.name:<15} {goat.breed:<12} {goat.sex.value:<7} "
            f"{goat.age:>2}y  {goat.health_status.value}"
        )


def print_goat(store: FarmStore, goat: Goat) -> None:
    print(f"ID: {goat.id}")
    print(f"Name: {goat.name}")
    print(f"Breed: {goat.breed}")
    print(f"Age: {goat.age} years")
    print(f"Sex: {goat.sex.value}")
    print(f"Health: {goat.health_status.value}")
    if goat.lineage:
        print(f"Lineage: {goat.lineage}")
    if goat.temperament_notes:
        print(f"Temperament: {goat.temperament_notes}")
    print(f"Medical records: {len(goat.medical_history)}")
    print(f"Milk records: {len(goat.milk_production)}")


def add_goat(store: FarmStore, args: argparse.Namespace) -> int:
    goat = Goat(
        name=args.name,
        breed=args.breed,
        age=args.age,
        sex=GoatSex(args.sex),
        health_status=HealthStatus(args.status),
        lineage=args.lineage,
        temperament_notes=args.temperament,
    )
    problems = validate_goat(goat)
    if problems:
        print(f"Cannot add goat: {', '.join(problems)}")
        return 1
    store.add_goat(goat)
    print(f"Added {goat.name} ({short_id(goat.id)})")
    return 0


def print_pastures(store: FarmStore) -> None:
    for pasture in store.pastures:
        rested = pasture_analysis.days_rested(pasture)
        rest = "never grazed" if rested is None else f"rested {rested}d of {pasture.rest_period}d"
        ready = "ready" if pasture_analysis.is_ready_for_grazing(pasture) else "resting"
        print(
            f"{short_id(pasture.id)}  {pasture.name:<15} {format_area(pasture.size):>8}  "
            f"{pasture.grass_type.value:<13} {pasture.condition.value:<10} "
            f"{pasture.current_occupancy}/{pasture.capacity} goats  {rest} ({ready})"
        )


def print_equipment(store: FarmStore) -> None:
    for item in equipment_analysis.sorted_inventory(store.equipment):
        due = " MAINTENANCE DUE" if equipment_analysis.maintenance_overdue(item) else ""
        print(
            f"{short_id(item.id)}  {item.name:<15} {item.type.value:<18} "
            f"{item.condition.value:<17} {item.location:<10} ${item.cost:,.2f}{due}"
        )
    print(f"\nInventory value: ${equipment_analysis.inventory_value(store.equipment):,.2f}")


def print_breeding(store: FarmStore) -> None:
    for record in breeding_analysis.sorted_records(store.breeding_records):
        print(
            f"{short_id(record.id)}  {store.goat_name(record.doe_id):<12} x {store.goat_name(record.buck_id):<12} "
            f"mated {record.mating_date:%Y-%m-%d}  due {record.expected_birth_date:%Y-%m-%d}  "
            f"{record.pregnancy_status.value}"
        )
    summary = breeding_analysis.breeding_summary(store.breeding_records)
    print(f"\nTotal records: {summary['total']}, kids born: {summary['kids_born']}")


def print_feeding(store: FarmStore) -> None:
    for schedule in feeding_analysis.sorted_schedules(store.feeding_schedules):
        target = "Group" if schedule.is_group_feeding else store.goat_name(schedule.goat_id)
        extras = f" + {', '.join(schedule.supplements)}" if schedule.supplements else ""
        print(
            f"{schedule.feeding_time:%H:%M}  {target:<12} {schedule.feed_type.value:<12} "
            f"{format_feed(schedule.quantity)}{extras}"
        )
    for goat in store.goats:
        entries = feeding_analysis.consumption_for_goat(store.feed_consumption, goat.id)
        if entries:
            rate = feeding_analysis.average_consumption_rate(entries)
            print(f"{goat.name}: average consumption {rate:.1f}% over {len(entries)} entries")


def print_alerts(store: FarmStore) -> None:
    print("Health alerts:")
    for alert in health_alerts(store.goats):
        print(f"  {alert['goat_name']}: {alert['message']}")

    print("\nMaintenance due:")
    for item in equipment_analysis.maintenance_due(store.equipment):
        print(f"  {item.name}: due {item.next_maintenance_date:%Y-%m-%d}")

    print("\nUpcoming breeding events:")
    for event in breeding_analysis.upcoming_events(store.breeding_records):
        days = breeding_analysis.days_until(event)
        print(f"  {event.date:%Y-%m-%d} {event.title} - {store.goat_name(event.goat_id)} (in {days} days)")


def print_milk(store: FarmStore, identifier: str | None) -> None:
    goats = [find_record(store.goats, identifier, "Goat")] if identifier else milk_analysis.producing_goats(store.goats)
    for goat in goats:
        totals = milk_analysis.milk_totals(goat)
        trend = milk_analysis.milk_trend(goat)
        print(
            f"{goat.name:<15} {totals['record_count']:>3} records  total {format_milk(totals['total_litres'])}  "
            f"avg {format_milk(totals['average_litres'])}  {trend.value}"
        )


async def advise(store: FarmStore, provider: AdviceProvider, kind: str, identifier: str) -> str:
    if kind == "pasture":
        return await provider.generate_pasture_management_advice(find_record(store.pastures, identifier, "Pasture"))
    if kind == "equipment":
        return await provider.generate_equipment_maintenance_tips(
            find_record(store.equipment, identifier, "Equipment")
        )

    goat = find_record(store.goats, identifier, "Goat")
    if kind == "profile":
        return await provider.generate_goat_profile_summary(goat)
    if kind == "feeding":
        return await provider.generate_feeding_plan(goat)
    if kind == "breeding":
        return await provider.generate_breeding_tips(goat)
    return await provider.interpret_milk_yield_trends(goat.milk_production, goat)


# =============================================================================
# Entry point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="goatherd", description="Goat herd records and farm advice")
    parser.add_argument("--data-dir", type=str, help="Directory holding the record files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    goats_parser = subparsers.add_parser("goats", help="List all goats")
    goats_parser.add_argument("--json", action="store_true", help="Output as JSON")

    goat_parser = subparsers.add_parser("goat", help="Add, show or delete a goat")
    goat_sub = goat_parser.add_subparsers(dest="goat_command")
    add_parser = goat_sub.add_parser("add", help="Add a goat")
    add_parser.add_argument("name")
    add_parser.add_argument("breed")
    add_parser.add_argument("--age", type=int, default=0, help="Age in years")
    add_parser.add_argument("--sex", choices=[s.value for s in GoatSex], default=GoatSex.FEMALE.value)
    add_parser.add_argument("--status", choices=[s.value for s in HealthStatus], default=HealthStatus.HEALTHY.value)
    add_parser.add_argument("--lineage", default="")
    add_parser.add_argument("--temperament", default="")
    show_parser = goat_sub.add_parser("show", help="Show goat details")
    show_parser.add_argument("id", help="Goat ID, ID prefix or name")
    delete_parser = goat_sub.add_parser("delete", help="Delete a goat")
    delete_parser.add_argument("id", help="Goat ID, ID prefix or name")

    subparsers.add_parser("pastures", help="List pastures and rest status")
    subparsers.add_parser("equipment", help="List equipment inventory")
    subparsers.add_parser("breeding", help="List breeding records")
    subparsers.add_parser("feeding", help="List feeding schedules and consumption")
    subparsers.add_parser("alerts", help="Health, maintenance and breeding reminders")

    milk_parser = subparsers.add_parser("milk", help="Milk yield totals and trends")
    milk_parser.add_argument("id", nargs="?", help="Goat ID, ID prefix or name")

    advise_parser = subparsers.add_parser("advise", help="Ask the advisor about a record")
    advise_parser.add_argument("kind", choices=ADVICE_KINDS)
    advise_parser.add_argument("id", help="Record ID, ID prefix or name")

    symptoms_parser = subparsers.add_parser("symptoms", help="Ask the advisor about symptoms")
    symptoms_parser.add_argument("id", help="Goat ID, ID prefix or name")
    symptoms_parser.add_argument("symptoms", help="Observed symptoms")

    ask_parser = subparsers.add_parser("ask", help="Ask a general goat-keeping question")
    ask_parser.add_argument("question", nargs="?", help="Question (omit to list sample questions)")

    check_parser = subparsers.add_parser("check", help="Verify configuration")
    check_parser.add_argument("--offline", action="store_true", help="Skip the API connection test")

    return parser


async def cli_main(argv: list[str] | None = None) -> int:
    """CLI entry point for goat herd records."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else settings.log_level)
    if args.data_dir:
        settings.goatherd_data_dir = Path(args.data_dir)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "check":
        ok = await check.main(skip_network=args.offline)
        return 0 if ok else 1

    store = FarmStore.open(JsonFileBackend())
    provider = AdviceProvider()

    try:
        if args.command == "goats":
            print_goats(store, args.json)

        elif args.command == "goat":
            if args.goat_command == "add":
                return add_goat(store, args)
            if args.goat_command == "show":
                print_goat(store, find_record(store.goats, args.id, "Goat"))
            elif args.goat_command == "delete":
                goat = find_record(store.goats, args.id, "Goat")
                store.delete_goat(goat)
                print(f"Deleted {goat.name}")
            else:
                parser.parse_args(["goat", "--help"])

        elif args.command == "pastures":
            print_pastures(store)

        elif args.command == "equipment":
            print_equipment(store)

        elif args.command == "breeding":
            print_breeding(store)

        elif args.command == "feeding":
            print_feeding(store)

        elif args.command == "alerts":
            print_alerts(store)

        elif args.command == "milk":
            print_milk(store, args.id)

        elif args.command == "advise":
            print(await advise(store, provider, args.kind, args.id))

        elif args.command == "symptoms":
            goat = find_record(store.goats, args.id, "Goat")
            print(await provider.analyze_health_symptoms(args.symptoms, goat))

        elif args.command == "ask":
            if not args.question or not args.question.strip():
                print("Try asking:")
                for question in SAMPLE_QUESTIONS:
                    print(f"  {question}")
            else:
                print(await provider.answer_general_question(args.question.strip()))

    except RecordNotFoundError as e:
        print(f"Error: {e}")
        return 1

    if provider.error_message:
        print(f"({provider.error_message})", file=sys.stderr)
    return 0


def cli() -> None:
    """Sync CLI entry point."""
    sys.exit(asyncio.run(cli_main()))


if __name__ == "__main__":
    cli()
