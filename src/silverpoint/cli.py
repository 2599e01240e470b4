"""CLI entry point for silverpoint."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from silverpoint.auth import AuthError, get_client_token
from silverpoint.config import DEFAULT_KROGER_BASE_URL, Settings
from silverpoint.logger import setup_logging
from silverpoint.models import SearchResult
from silverpoint.search import SearchOrchestrator

ENV_PATH = Path(".env")

USAGE = (
    "Usage: silverpoint init\n"
    "       silverpoint search <term> [<lat> <lng>]\n"
    "       silverpoint serve"
)


def main() -> None:
    """CLI entry point."""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)
    command, args = sys.argv[1], sys.argv[2:]
    if command == "init":
        _run_init()
    elif command == "search":
        _run_search(args)
    elif command == "serve":
        _run_serve()
    else:
        print(USAGE)
        sys.exit(1)


def _run_init() -> None:
    """Run the interactive configuration wizard."""
    print()
    print("  SilverPoint Setup")
    print("  =================")

    if ENV_PATH.exists():
        print()
        print("  .env already exists.")
        answer = input("  Overwrite? [y/N]: ").strip().lower()
        if answer != "y":
            print("  Aborted.")
            return

    client_id, client_secret = _prompt_credentials()

    if client_id:
        print()
        print("  Verifying credentials...", end=" ", flush=True)
        try:
            asyncio.run(get_client_token(client_id, client_secret))
            print("OK!")
        except AuthError as e:
            print("FAILED")
            print(f"  {e}")
            sys.exit(1)

    google_key = _prompt_google_key()

    _write_env(client_id, client_secret, google_key)

    print()
    print("  Setup complete! Configuration saved to .env")
    print()


def _prompt_credentials() -> tuple[str, str]:
    print()
    print("  Step 1: Kroger API Credentials (Optional)")
    print()
    print("  Live prices need a Kroger developer application.")
    print("  1. Go to https://developer.kroger.com")
    print("  2. Create an application with the product.compact scope")
    print("  3. Note your Client ID and Client Secret")
    print("  Leave both blank to use synthesized demo prices only.")
    print()
    client_id = input("  Client ID: ").strip()
    client_secret = input("  Client Secret: ").strip()
    if bool(client_id) != bool(client_secret):
        print("  Error: Both Client ID and Client Secret are required.")
        sys.exit(1)
    return client_id, client_secret


def _prompt_google_key() -> str:
    print()
    print("  Step 2: Google Places API Key (Optional)")
    print()
    print("  With a key, demo prices use real supermarkets near the searcher.")
    print("  Without one, a built-in list of demo stores is used.")
    print()
    return input("  Google Maps API key: ").strip()


def _run_search(args: list[str]) -> None:
    if len(args) not in (1, 3):
        print(USAGE)
        sys.exit(1)
    lat = lng = None
    if len(args) == 3:
        try:
            lat, lng = float(args[1]), float(args[2])
        except ValueError:
            print("  Error: <lat> and <lng> must be numbers.")
            sys.exit(1)

    settings = Settings.from_env(ENV_PATH)
    setup_logging(settings.log_level)
    orchestrator = SearchOrchestrator.from_settings(settings)
    results = asyncio.run(orchestrator.search(args[0], lat, lng))

    if not results:
        print("  No offers found.")
        return
    print()
    for i, result in enumerate(results, 1):
        print(f"    {i}. {_format_result(result)}")
    print()


def _format_result(result: SearchResult) -> str:
    stock = "" if result.in_stock else " (out of stock)"
    return (
        f"${result.price:.2f}  {result.product_name} at {result.store_name}, "
        f"{result.distance_mi:.1f} mi{stock}"
    )


def _run_serve() -> None:
    import uvicorn

    from silverpoint.app import create_app

    settings = Settings.from_env(ENV_PATH)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


def _write_env(client_id: str, client_secret: str, google_key: str = "") -> None:
    """Write configuration to .env file."""
    content = ""
    if client_id:
        content += (
            f"KROGER_CLIENT_ID={client_id}\n"
            f"KROGER_CLIENT_SECRET={client_secret}\n"
            f"KROGER_BASE_URL={DEFAULT_KROGER_BASE_URL}\n"
        )
    if google_key:
        content += f"\n# Google Places store lookup\nGOOGLE_MAPS_API_KEY={google_key}\n"
    ENV_PATH.write_text(content)
