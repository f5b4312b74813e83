#!/usr/bin/env python3
"""
Setup Check - Verify the environment for content-intel.

Usage: python scripts/setup_check.py

Verifies: Python version, dependencies, provider env vars, project layout.
No provider key is required: without one every operation is answered by
the builtin generator and the rule engine.
"""

import importlib.util
import os
import sys
from pathlib import Path

GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
RESET = "\033[0m"

PROVIDER_ENV = {
    "GROQ_API_KEY": "Groq (first choice, free tier)",
    "OPENAI_API_KEY": "OpenAI",
    "ANTHROPIC_API_KEY": "Anthropic",
    "OLLAMA_URL": "Ollama (local)",
}

DEPENDENCIES = ["httpx", "openai", "anthropic", "pydantic", "typer", "rich"]

checks_passed = 0
checks_failed = 0
checks_warned = 0


def check(name: str, condition: bool, fix: str = ""):
    global checks_passed, checks_failed
    if condition:
        print(f"  {GREEN}PASS{RESET}  {name}")
        checks_passed += 1
    else:
        print(f"  {RED}FAIL{RESET}  {name}")
        if fix:
            print(f"        FIX: {fix}")
        checks_failed += 1


def warn(name: str, condition: bool, note: str = ""):
    global checks_warned
    if not condition:
        print(f"  {YELLOW}WARN{RESET}  {name}")
        if note:
            print(f"        NOTE: {note}")
        checks_warned += 1


def main():
    print("\nSetup Check\n")

    v = sys.version_info
    check(
        f"Python {v.major}.{v.minor}.{v.micro}",
        v.major == 3 and v.minor >= 10,
        "Python 3.10+ required",
    )

    root = Path(__file__).parent.parent
    for d in ["src/content_intel", "tests", "evals"]:
        check(f"Directory: {d}/", (root / d).is_dir(), f"Missing {d}/")
    check("File: pyproject.toml", (root / "pyproject.toml").is_file(), "Missing pyproject.toml")

    # Providers
    print()
    configured = [label for name, label in PROVIDER_ENV.items() if os.getenv(name, "").strip()]
    for name, label in PROVIDER_ENV.items():
        if os.getenv(name, "").strip():
            check(f"{name} set ({label})", True)
    warn(
        "At least one provider configured",
        bool(configured),
        "Optional: without a provider every answer comes from the builtin generator",
    )

    # Dependencies
    print()
    for module in DEPENDENCIES:
        check(
            f"{module} installed",
            importlib.util.find_spec(module) is not None,
            "pip install -e .",
        )
    check(
        "content_intel importable",
        importlib.util.find_spec("content_intel") is not None,
        "pip install -e .",
    )
    warn(
        "pytest installed (test extra)",
        importlib.util.find_spec("pytest") is not None,
        'pip install -e ".[test]"',
    )

    print(f"\n{'=' * 40}")
    print(f"  {GREEN}{checks_passed} passed{RESET}, ", end="")
    if checks_failed:
        print(f"{RED}{checks_failed} failed{RESET}, ", end="")
    if checks_warned:
        print(f"{YELLOW}{checks_warned} warnings{RESET}", end="")
    print()
    print(f"{'=' * 40}\n")

    sys.exit(1 if checks_failed else 0)


if __name__ == "__main__":
    main()
