from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from signup_engine.errors import ConfigurationError


@dataclass
class Config:

    # Maximum number of volunteers per clinic date
    CAPACITY: Optional[int] = None

    # RANDOM SEED (None = fresh entropy every run)
    SEED: Optional[int] = None

    ### OUTPUT ###

    OUTPUT_DIR: Path = Path("outputs")
    SCHEDULE_TITLE: str = "[Clinic Name] Schedule"

    # Size of the synthetic pool used when no input is supplied
    SYNTHETIC_PEOPLE: int = 40

    # Detailed logging for volunteers with these emails
    INSPECT_EMAILS: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.OUTPUT_DIR = Path(self.OUTPUT_DIR)

    def validate(self):
        """
        Validate the Config object has sensible values before allocating.
        """
        validate_capacity(self.CAPACITY)
        if self.SEED is not None and (
            isinstance(self.SEED, bool) or not isinstance(self.SEED, int)
        ):
            raise ConfigurationError("SEED must be an int or None.")
        if not str(self.OUTPUT_DIR).strip():
            raise ConfigurationError("OUTPUT_DIR must not be empty.")
        if self.SYNTHETIC_PEOPLE <= 0:
            raise ConfigurationError("SYNTHETIC_PEOPLE must be > 0.")


def validate_capacity(capacity: object) -> int:
    """Return capacity unchanged if it is a positive int, else raise ConfigurationError."""
    if capacity is None:
        raise ConfigurationError("CAPACITY is missing.")
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ConfigurationError(
            f"CAPACITY must be a positive integer, got {capacity!r}."
        )
    if capacity <= 0:
        raise ConfigurationError(f"CAPACITY must be > 0, got {capacity}.")
    return capacity


cfg = Config(
    CAPACITY=3,
    SEED=2016,
    OUTPUT_DIR=Path("outputs"),
    SCHEDULE_TITLE="[Clinic Name] Summer 2016 Schedule",
    SYNTHETIC_PEOPLE=40,
)
