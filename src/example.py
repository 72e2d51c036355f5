"""
Module with example code for running the signup engine.

There are three ways to run the code:

1. Run the code with default options. This will generate
    synthetic signups from the config and allocate them.
2. Run the code with custom signups defined via code.
3. Run the code with signups pre-defined in a JSON file.

Usage via cli:
    python3 -m src.example --option 1
"""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from signup_engine import Config, InputData, Person, load_input, run_allocation
from signup_engine.main import Reporter, default_input_builder

cfg = Config(
    CAPACITY=2,
    SEED=7,
    OUTPUT_DIR=Path("outputs"),
    SCHEDULE_TITLE="[Clinic Name] Summer 2016 Schedule",
    SYNTHETIC_PEOPLE=30,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run signup engine examples.")
    parser.add_argument(
        "--option",
        type=int,
        default=3,
        choices=(1, 2, 3),
        help="Example scenario to run (default: 3).",
    )
    return parser.parse_args()


def run_option(option: int) -> None:
    print(f"Running example code with option {option}")

    # Run the code with default options. This will generate
    # synthetic signups from the config and allocate them.
    if option == 1:

        # The parameters below are defaults, with the exception of config,
        # they can be omitted i.e. the below is equivalent to:
        # run_allocation(cfg)
        run_allocation(
            config=cfg,
            validate_config=True,
            input_builder=default_input_builder,
            reporter=Reporter(cfg),
            enable_reporting=True,
        )

    # Run the code with custom signups defined via code.
    elif option == 2:

        people = [
            Person("A", "a@example.edu", [date(2016, 6, 1)]),
            Person("B", "b@example.edu", [date(2016, 6, 1), date(2016, 6, 8)]),
            Person("C", "c@example.edu", [date(2016, 6, 1)]),
            Person("D", "d@example.edu", [date(2016, 6, 8), date(2016, 6, 15)]),
        ]

        run_allocation(cfg, data=InputData(people=people))

    # Run the code with signups defined via JSON. Typical production use.
    elif option == 3:

        data = load_input(Path("src/example_signups.json"))
        cfg.CAPACITY = data.capacity or cfg.CAPACITY
        run_allocation(cfg, data=data)
    else:
        raise SystemExit(f"Unknown option {option}")


def main() -> None:
    args = parse_args()
    run_option(args.option)


if __name__ == "__main__":
    main()
