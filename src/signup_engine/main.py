from __future__ import annotations

import argparse
import random
from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional, Sequence

from signup_engine.config import Config, cfg
from signup_engine.errors import SignupEngineError
from signup_engine.generate.volunteers import SignupGenConfig, create_signups
from signup_engine.input_data import InputData, load_input, parse_capacity
from signup_engine.model import SignupModel
from signup_engine.output import produce_outputs
from signup_engine.reporting import Reporter
from signup_engine.result_types import AllocationResult

InputBuilder = Callable[[Config], InputData]


def default_input_builder(config: Config) -> InputData:
    """Build synthetic signups using the project's helper."""
    seed = config.SEED if config.SEED is not None else 42
    gen_cfg = SignupGenConfig(n=config.SYNTHETIC_PEOPLE, seed=seed)
    return InputData(people=create_signups(gen_cfg), capacity=config.CAPACITY)


def run_allocation(
    config: Config | None = None,
    data: InputData | None = None,
    input_builder: InputBuilder | None = None,
    reporter: Reporter | None = None,
    validate_config: bool = True,
    enable_reporting: bool = True,
    write_outputs: bool = True,
    rng: random.Random | None = None,
) -> AllocationResult:
    """
    Load, allocate, and optionally report on a signup scenario.

    Parameters
    ----------
    config:
        The configuration for the run. Defaults to `signup_engine.config.cfg` when omitted.
        When `CAPACITY` is None the capacity read from the input data is used.
    data:
        Pre-built `InputData`. When omitted then `input_builder` (or the default synthetic
        builder) is used to construct data from the given config.
    input_builder:
        Optional callable that accepts a `Config` and returns `InputData`. Ignored when
        `data` is supplied.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and no reporter is
        provided, the default `Reporter` is used.
    validate_config:
        Toggle to run `Config.validate()` once capacity has been resolved.
    enable_reporting:
        When False, skips reporter pre/post hooks even if a reporter is provided.
    write_outputs:
        When False, nothing is written to `OUTPUT_DIR`.
    rng:
        Random generator for the draw. Defaults to `random.Random(config.SEED)`.

    Returns
    -------
    AllocationResult
        Schedule, waitlist and DataFrames from the run.
    """
    cfg_obj = config or cfg

    input_data = data
    if input_data is None:
        builder = input_builder or default_input_builder
        input_data = builder(cfg_obj)

    if cfg_obj.CAPACITY is None and input_data.capacity is not None:
        cfg_obj = replace(cfg_obj, CAPACITY=input_data.capacity)
    if validate_config:
        cfg_obj.validate()

    model = SignupModel(cfg_obj, input_data, rng=rng)

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter(cfg_obj)

    model.build()
    if active_reporter is not None:
        active_reporter.pre_solve(model)

    result = model.allocate()

    if active_reporter is not None:
        active_reporter.post_solve(result)

    if write_outputs:
        produce_outputs(result, cfg_obj)

    return result


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Randomly allocate volunteers to clinic dates, scarcest dates first."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="CSV or JSON signup file (default: synthetic signups).",
    )
    parser.add_argument(
        "--capacity", type=str, default=None, help="Volunteers per date."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--output-dir", type=Path, default=None, help="Where to write outputs."
    )
    parser.add_argument(
        "--synthetic",
        type=int,
        default=None,
        help="Number of synthetic people when no --input is given.",
    )
    parser.add_argument(
        "--no-report", action="store_true", help="Skip the text/PDF report."
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> AllocationResult:
    """CLI entry point."""
    args = parse_args(argv)
    run_cfg = replace(cfg, INSPECT_EMAILS=list(cfg.INSPECT_EMAILS))
    try:
        if args.capacity is not None:
            run_cfg.CAPACITY = parse_capacity(args.capacity)
        if args.seed is not None:
            run_cfg.SEED = args.seed
        if args.output_dir is not None:
            run_cfg.OUTPUT_DIR = args.output_dir
        if args.synthetic is not None:
            run_cfg.SYNTHETIC_PEOPLE = args.synthetic

        data = None
        if args.input is not None:
            data = load_input(args.input)
            if args.capacity is None and data.capacity is not None:
                run_cfg.CAPACITY = data.capacity

        return run_allocation(
            config=run_cfg,
            data=data,
            enable_reporting=not args.no_report,
        )
    except SignupEngineError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
