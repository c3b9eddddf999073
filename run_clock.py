from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ball_clock.config import ClockConfig, Config
from ball_clock.simulator import format_entry, read_sizes, run_many

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compute how many days a ball clock runs before repeating.")
    ap.add_argument("sizes", type=int, nargs="*", help="Ball counts to simulate. Read from stdin (0 ends) if omitted.")
    ap.add_argument("--config", type=str, default=None, help="YAML config (see example_config.yaml).")
    ap.add_argument("--max-steps", type=int, default=None, help="Give up after this many simulated minutes.")
    ap.add_argument("--debug", action="store_true", help="Log tray dumps and 12-hour rollovers.")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cfg = Config.from_yaml(args.config) if args.config else Config.default()
    clock_cfg = cfg.clock
    if args.max_steps is not None:
        clock_cfg = ClockConfig(
            min_size=clock_cfg.min_size,
            max_size=clock_cfg.max_size,
            max_steps=args.max_steps,
        )

    if args.sizes:
        sizes = args.sizes
    elif cfg.sizes:
        sizes = cfg.sizes
    else:
        sizes = read_sizes(sys.stdin)

    sink = logger.debug if args.debug else None
    entries = run_many(sizes, config=clock_cfg, sink=sink)
    for entry in entries:
        print(format_entry(entry))

    return 0 if all(e.ok for e in entries) else 1


if __name__ == "__main__":
    sys.exit(main())
