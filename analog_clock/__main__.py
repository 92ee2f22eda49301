from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Ensure the repository root (parent of this package) is on ``sys.path``.

    When this module is executed as a script (``python analog_clock/__main__.py``)
    the package may not be discoverable, so the parent directory is inserted.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # Works when executed as a module: python -m analog_clock
    from .app import LaunchFailure, run  # type: ignore[attr-defined]
    from .log import get_logger  # type: ignore[attr-defined]
except ImportError:
    # Works when executed as a script.
    _ensure_repo_root_on_path()
    from analog_clock.app import LaunchFailure, run  # type: ignore[attr-defined]
    from analog_clock.log import get_logger  # type: ignore[attr-defined]


def main() -> int:
    """Entry point for running the clock from the command line."""
    try:
        return run()
    except LaunchFailure as exc:
        get_logger("analog_clock").error("Failed to launch window: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
