from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Ensure the repository root (parent of this package) is on ``sys.path``.

    If this module is executed as a script (``python box_connect/__main__.py``),
    the package may not be discoverable by Python.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # Works when executed as a module: python -m box_connect
    from .app import run  # type: ignore[attr-defined]
    from .config import load_config  # type: ignore[attr-defined]
    from .logging_config import configure_logging, resolve_log_level  # type: ignore[attr-defined]
except ImportError:
    _ensure_repo_root_on_path()
    from box_connect.app import run  # type: ignore[attr-defined]
    from box_connect.config import load_config  # type: ignore[attr-defined]
    from box_connect.logging_config import configure_logging, resolve_log_level  # type: ignore[attr-defined]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="box_connect", description="Connect the matching boxes.")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING (default) or ERROR")
    parser.add_argument("--config", type=Path, default=None, help="JSON file with puzzle tunables")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for running the puzzle from the command line."""
    args = build_parser().parse_args(argv)
    configure_logging(log_level=resolve_log_level(args.log_level))
    return run(config=load_config(args.config))


if __name__ == "__main__":
    raise SystemExit(main())
