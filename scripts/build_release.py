"""CLI to build logstasher releases for all supported platforms."""

from __future__ import annotations

from release_packaging.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
