"""Entry point for a simulated run over a few windows."""

from __future__ import annotations

import logging

from .config import load_bucket_config
from .main import build_memory_bucket
from ..core.clock import ManualClock


def main():  # pragma: no cover - manual run
    config = load_bucket_config()
    logging.basicConfig(
        level=config.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    clock = ManualClock()
    bucket, persistence = build_memory_bucket(config, clock=clock)
    step = config.window / 4
    for _ in range(12):
        ok = bucket.try_consume(max(1, config.quantity // 3))
        print(
            f"{clock.now().isoformat()} consumed={ok} remaining={bucket.get_remaining()}"
        )
        clock.advance(step)
    print(f"Finished demo loop after {persistence.save_count} writes")


if __name__ == "__main__":  # pragma: no cover
    main()
