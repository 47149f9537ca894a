"""
Entry point for Break Reminder.
"""

import argparse

from breakreminder.app import ReminderApp
from breakreminder.data.store import SettingsStore
from breakreminder.utils.constants import APP_VERSION, MINIMIZED_FLAG


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Break reminder that lives in your tray.")
    parser.add_argument(
        MINIMIZED_FLAG,
        action="store_true",
        help="start hidden in the system tray (used by autostart)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    args = parser.parse_args()

    # Load settings
    store = SettingsStore()
    store.load()

    # Create and run the application
    app = ReminderApp(store, start_minimized=args.minimized)
    app.run()


if __name__ == "__main__":
    main()
