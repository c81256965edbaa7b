import time
import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from menagerie import __version__
from menagerie.execution.execution import AnimalPipeline

DEFAULT_ANIMALS = ["animal", "pig", "dog", "cat"]


def setup_logging(run_dir: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """Configure logging to the terminal, and to run_dir/run.log when a run dir is given."""
    logger = logging.getLogger("menagerie")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler (stderr; stdout is reserved for the animals)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if run_dir is not None:
        file_handler = logging.FileHandler(run_dir / "run.log")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def save_yaml(obj: Dict[str, Any], path: Path) -> None:
    with open(path, "w") as f:
        yaml.safe_dump(obj, f, sort_keys=False)

def make_run_dir(experiment_name: str, root: str = "runs") -> Path:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    base = Path(root) / experiment_name
    run_dir = base / ts
    # same-second runs get _1, _2, ...
    suffix = 0
    while True:
        try:
            run_dir.mkdir(parents=True, exist_ok=False)
            return run_dir
        except FileExistsError:
            suffix += 1
            run_dir = base / f"{ts}_{suffix}"


def run(descriptors: List[str], logger: logging.Logger) -> int:
    logger.info(f"Resolving animals: {descriptors}")
    pipeline = AnimalPipeline.build(descriptors)
    logger.info(f"Resolved {len(pipeline)} animals")

    n = pipeline.execute()
    logger.debug(f"Executed {n} animals")
    return n


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Make every animal in the menagerie sound off.")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--run-root", default=None,
                    help="if set, write config.yaml and run.log under <run-root>/menagerie/<timestamp>")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = ap.parse_args(argv)

    level = getattr(logging, args.log_level)
    run_dir = None
    if args.run_root is not None:
        run_dir = make_run_dir("menagerie", root=args.run_root)
        save_yaml({"animals": DEFAULT_ANIMALS, "log_level": args.log_level}, run_dir / "config.yaml")

    logger = setup_logging(run_dir, level)
    if run_dir is not None:
        logger.info(f"Run directory: {run_dir}")

    start_time = time.time()

    try:
        run(DEFAULT_ANIMALS, logger)
    except Exception as e:
        logger.exception(f"Run failed with error: {e}")
        raise

    elapsed_time = time.time() - start_time
    logger.info(f"Run complete. Total time: {elapsed_time:.2f}s")


if __name__ == "__main__":
    main()
