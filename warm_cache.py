#!/usr/bin/env python3
"""
Precompute EEZ density series into the result cache.

Usage:
    python warm_cache.py 2025-03-20 "Guadeloupean Exclusive Economic Zone"
    python warm_cache.py 2025-03-20 "EEZ A" "EEZ B" --force   # Recompute even if cached
    python warm_cache.py --clear                             # Drop every cache entry
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import Container  # noqa: E402
from app.errors import ForecastError  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(to_file=True)


def warm(container: Container, timestamp: str, eez_names: list[str], force: bool = False) -> int:
    """Cache EEZ series for a date; returns the number of failures."""
    service = container.forecast
    try:
        artifact = service.resolve(timestamp)
    except ForecastError as e:
        logger.error("{}: {}", timestamp, e.message)
        return len(eez_names)
    logger.info("Warming {} EEZ series from {}", len(eez_names), artifact.artifact_id)

    todo = eez_names if force else [e for e in eez_names if not service.is_cached(timestamp, e)]

    for eez in set(eez_names) - set(todo):
        logger.info("{}: already cached", eez)

    failures = 0
    for eez in todo:
        try:
            service.precompute(timestamp, [eez], force=force)
        except ForecastError as e:
            logger.error("{}: {}", eez, e.message)
            failures += 1
    return failures


def main():
    args = sys.argv[1:]
    container = Container()

    if "--clear" in args:
        container.cache_repo.clear()
        return

    force = "--force" in args or "-f" in args
    args = [a for a in args if a not in ("--force", "-f")]

    if len(args) < 2:
        print(__doc__)
        sys.exit(1)

    timestamp, eez_names = args[0], args[1:]
    container.init()
    try:
        failures = warm(container, timestamp, eez_names, force=force)
    finally:
        container.close()

    logger.info("Cache warm-up complete ({} failed)", failures)
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
