"""Headless entry point: apply a query string to a fresh session.

Usage:
    python main.py "?setting.collapseDatasetPanels=true&name=a.csv&url=https://..."
"""

import sys
from pathlib import Path

from glance_session import create_session
from glance_session.infrastructure.history import StaticLocation
from glance_session.services.settings import SETTINGS_PATH, SettingsStorage, SettingsStore


def run_query(search: str, settings_path: Path = SETTINGS_PATH) -> None:
    """Process `search` as page-load parameters and report the outcome.

    Args:
        search: Query string, with or without the leading '?'.
        settings_path: JSON file backing the settings store.
    """
    session = create_session(
        "headless",
        location=StaticLocation(search),
        settings=SettingsStore(SettingsStorage(settings_path)),
    )
    batch = session.process_url_args()
    # Wait for the fire-and-forget loads before reporting
    session.loader.executor.shutdown(wait=True)

    print(f"Route: {session.store.route.value}")
    if batch is None:
        print("No datasets requested.")
    for record in session.store.state.value.datasets:
        status = record.status if record.error is None else f"{record.status}: {record.error}"
        print(f"  {record.name} <- {record.url} [{status}]")

    session.close()


def main() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        return
    run_query(sys.argv[1])


if __name__ == "__main__":
    main()
