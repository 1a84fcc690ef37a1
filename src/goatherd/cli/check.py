"""Check command to verify configuration and the chat-completion connection."""

import os

from goatherd.advisor.client import chat_completion
from goatherd.core.config import get_data_dir, settings
from goatherd.core.errors import AdvisorError
from goatherd.data.store import COLLECTIONS


def check_mark(success: bool) -> str:
    """Return a check mark or X based on success."""
    return "[OK]" if success else "[MISSING]"


def mask_key(key: str | None) -> str:
    """Show only the last four characters of a secret."""
    if not key:
        return "(not set)"
    return f"...{key[-4:]}" if len(key) > 4 else "****"


def check_env_vars() -> dict[str, bool]:
    """Check which environment variables are configured."""
    print("Checking environment variables...")
    print("-" * 50)

    checks = {
        "OPENAI_API_KEY": bool(os.getenv("OPENAI_API_KEY") or settings.openai_api_key),
        "GOATHERD_DATA_DIR": bool(os.getenv("GOATHERD_DATA_DIR")),
        "BOOTSTRAP_URL": bool(os.getenv("BOOTSTRAP_URL") or settings.bootstrap_url),
        "BOOTSTRAP_MARKER": bool(os.getenv("BOOTSTRAP_MARKER") or settings.bootstrap_marker),
    }

    required = ["OPENAI_API_KEY"]
    optional = ["GOATHERD_DATA_DIR", "BOOTSTRAP_URL", "BOOTSTRAP_MARKER"]

    for var in required:
        print(f"  {check_mark(checks[var])} {var} (required for advice)")

    for var in optional:
        print(f"  {check_mark(checks[var])} {var} (optional)")

    print()
    return checks


def check_data_files() -> dict[str, bool]:
    """Report which record collections exist on disk."""
    data_dir = get_data_dir()
    print(f"Checking record files in {data_dir}...")
    print("-" * 50)

    found = {}
    for key in COLLECTIONS:
        found[key] = (data_dir / f"{key}.json").exists()
        print(f"  {check_mark(found[key])} {key}.json")

    print()
    return found


async def test_chat_connection() -> bool:
    """Send a one-line prompt to the chat-completion API."""
    print("Testing chat-completion API...")
    print("-" * 50)
    print(f"  Endpoint: {settings.chat_api_url}")
    print(f"  Model:    {settings.chat_model}")
    print(f"  Key:      {mask_key(settings.openai_api_key)}")

    try:
        reply = await chat_completion("Reply with the single word: ready", "You are a connectivity check.")
    except AdvisorError as e:
        print(f"  [FAILED] {e}")
        print()
        return False

    print(f"  [OK] Reply: {reply[:60]}")
    print()
    return True


async def main(skip_network: bool = False) -> bool:
    """Run all checks and print a summary."""
    print()
    print("=" * 50)
    print("goatherd check")
    print("=" * 50)
    print()

    env = check_env_vars()
    check_data_files()

    chat_ok = False
    if env["OPENAI_API_KEY"] and not skip_network:
        chat_ok = await test_chat_connection()

    print("=" * 50)
    print("Summary")
    print("=" * 50)
    print()

    if chat_ok:
        print("  Advisor:   Connected")
    elif skip_network and env["OPENAI_API_KEY"]:
        print("  Advisor:   Configured (not tested)")
    else:
        print("  Advisor:   NOT CONNECTED")

    if env["BOOTSTRAP_URL"] and env["BOOTSTRAP_MARKER"]:
        print("  Bootstrap: Configured")
    else:
        print("  Bootstrap: Not configured (optional)")

    print()
    return chat_ok or (skip_network and env["OPENAI_API_KEY"])
