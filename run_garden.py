"""Run the greenhouse simulation from a source checkout."""

import sys

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")

from smart_garden.workers.garden_cli import main

if __name__ == "__main__":
    sys.exit(main())
