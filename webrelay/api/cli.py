"""
Terminal adapter for webrelay.

Architectural role:
- Gives operators the same search/scrape forwarding without running the
  HTTP server.
- Delegates every outbound call to `webrelay.jina.client.JinaClient`.

Interface responsibilities:
- One-shot mode: `-u/--scrape-url URL` and/or `-q/--scrape-question TEXT`
  print the relayed content and exit.
- Interactive mode (no flags): read stdin lines until `exit`/`quit`.

Interactive commands:
- `/scrape <url>` scrapes a page.
- Any other non-empty line is sent as a search question.

Error handling strategy:
- `DispatchError` is printed to stderr; in one-shot mode the exit status is 1.
- EOF and keyboard interrupts end the loop without traceback output.
"""

import argparse
import sys

from webrelay.errors import DispatchError
from webrelay.jina.client import JinaClient
from webrelay.jina.config import JinaConfig


# =========================================================
# UTF-8 SAFE STDOUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    except (OSError, ValueError):
        pass


SCRAPE_COMMAND = "/scrape"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webrelay-cli",
        description="Relay Jina AI reader/search results to the terminal.",
    )
    parser.add_argument("-u", "--scrape-url", help="Scrape a URL into clean text")
    parser.add_argument("-q", "--scrape-question", help="Search the web for a question")
    return parser


def run_once(client: JinaClient, scrape_url=None, scrape_question=None) -> int:
    """
    Execute the one-shot flags in order (scrape, then search).

    Returns:
        Process exit status: 0 on success, 1 if any call failed.
    """
    status = 0
    for label, value, call in (
        ("scrape", scrape_url, client.scrape_url),
        ("search", scrape_question, client.scrape_question),
    ):
        if not value:
            continue
        try:
            print(call(value))
        except DispatchError as err:
            print(f"{label} failed: {err}", file=sys.stderr)
            status = 1
    return status


def handle_line(client: JinaClient, line: str) -> str:
    """Dispatch one interactive line and return the text to print."""
    if line == SCRAPE_COMMAND or line.startswith(SCRAPE_COMMAND + " "):
        url = line[len(SCRAPE_COMMAND):].strip()
        if not url:
            return "Usage: /scrape <url>"
        return client.scrape_url(url)
    return client.scrape_question(line)


def interactive(client: JinaClient) -> None:
    print("webrelay started. (Type 'exit' to quit, '/scrape <url>' to scrape)\n")
    print("-" * 60)

    while True:
        try:
            line = input("Question: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        if line.lower() in ("exit", "quit"):
            break

        try:
            print("\n" + handle_line(client, line))
        except DispatchError as err:
            print(f"Request failed: {err}", file=sys.stderr)

        print("\n" + "-" * 60 + "\n")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    client = JinaClient(JinaConfig.from_env())

    if args.scrape_url or args.scrape_question:
        return run_once(client, args.scrape_url, args.scrape_question)

    interactive(client)
    return 0


if __name__ == "__main__":
    sys.exit(main())
