"""
Interactive CLI adapter for the satire service.

Architectural role:
- Exposes a terminal loop over `RequestOrchestrator.handle`.
- Keeps the active language, length and style between turns.

Request lifecycle (per user turn):
1. Read one line from stdin.
2. Handle local control commands (`exit`/`quit`, `/lang`, `/length`, `/style`).
3. Forward any other text as the `word` of a POST request.
4. Print satire, category and any degraded-path error.

Input validation behavior:
- Empty input is ignored.
- `/length` and `/style` reject values outside their allowed sets.
- `/lang` accepts anything; the registry resolves it.

Error handling strategy:
- EOF and keyboard interrupts terminate the loop without traceback output.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import sys

from satire_api.core.engine import RequestOrchestrator
from satire_api.core.types import LENGTH_MODES, STYLE_MODES
from satire_api.nlp import language_registry


# =========================================================
# UTF-8 SAFE STDOUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    except (AttributeError, ValueError):
        pass


def apply_command(line: str, settings: dict) -> str:
    """Apply a `/lang`, `/length` or `/style` command to `settings`.

    Returns:
        Feedback text for the operator.
    """
    command, _, value = line.partition(" ")
    value = value.strip()

    if command == "/lang":
        settings["lang"] = language_registry.resolve(value)
        return f"Language: {language_registry.display_name(settings['lang'])} ({settings['lang']})"

    if command == "/length":
        if value.lower() not in LENGTH_MODES:
            return f"Usage: /length {'|'.join(LENGTH_MODES)}"
        settings["length"] = value.lower()
        return f"Length: {settings['length']}"

    if command == "/style":
        if value.lower() not in STYLE_MODES:
            return f"Usage: /style {'|'.join(STYLE_MODES)}"
        settings["style"] = value.lower()
        return f"Style: {settings['style']}"

    return "Unknown command. Available: /lang <tag>, /length short|long, /style printer|smile"


def format_result(status_code: int, payload: dict) -> str:
    if status_code != 200:
        return f"[{status_code}] {payload.get('error', '')}"

    lines = [payload["satire"], f"({payload['type']})"]
    if payload.get("error"):
        lines.append(f"[fallback: {payload['error']}]")
    return "\n".join(lines)


# =========================================================
# MAIN APPLICATION LOOP
# =========================================================

def main():
    """Run the interactive terminal session."""
    orchestrator = RequestOrchestrator()
    settings = {"lang": language_registry.DEFAULT_TAG}

    mode = "upstream" if orchestrator.config.generation_enabled else "local fallback only"
    print(f"Satire CLI started ({mode}). Type 'exit' to quit.\n")
    print("-" * 60)

    while True:

        try:
            line = input("Word: ").strip()

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not line:
            continue

        if line.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        if line.startswith("/"):
            print(apply_command(line, settings))
            continue

        fields = dict(settings, word=line)
        result = asyncio.run(orchestrator.handle("POST", fields))

        print()
        print(format_result(result.status_code, result.payload))
        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
