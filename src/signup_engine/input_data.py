from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

import pandas as pd

from signup_engine.dates import parse_date_list
from signup_engine.errors import ConfigurationError, ParseError
from signup_engine.volunteer import Person

NAME_COLUMNS = ("name",)
EMAIL_COLUMNS = ("email", "contact")
DATES_COLUMNS = ("dates", "available_dates", "availability")
CAPACITY_COLUMNS = ("capacity",)


@dataclass
class InputData:
    people: list[Person] = field(default_factory=list)
    capacity: Optional[int] = None  # as read from the input source, if any

    def __post_init__(self) -> None:
        for p in self.people:
            if not isinstance(p, Person):
                raise TypeError(f"InputData.people must hold Person, got {type(p)!r}")


def parse_capacity(value: Any) -> int:
    """
    Turn a raw capacity cell into a positive int. Floats are floored.

    Raises ConfigurationError when the value is missing, non-numeric, zero or
    negative.
    """
    if value is None or isinstance(value, bool):
        raise ConfigurationError(f"Capacity is missing or invalid: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ConfigurationError("Capacity is missing.")
        try:
            value = float(text)
        except ValueError as exc:
            raise ConfigurationError(f"Capacity is not a number: {text!r}") from exc
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConfigurationError(f"Capacity is not a finite number: {value!r}")
        value = math.floor(value)
    try:
        capacity = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Capacity is not a number: {value!r}") from exc
    if capacity <= 0:
        raise ConfigurationError(f"Capacity must be > 0, got {capacity}.")
    return capacity


def person_from_row(
    name: Any, email: Any, dates_field: Any, position: Optional[int] = None
) -> Person:
    """
    Build a Person from one (name, contact, "M/D/YY, M/D/YY") row.

    `position` is the 1-based data row, used only in error messages.
    """
    raw_dates = "" if _is_blank(dates_field) else str(dates_field)
    try:
        dates = parse_date_list(raw_dates)
    except ParseError as exc:
        raise ParseError(str(exc), token=exc.token, position=position) from exc
    return Person(
        name="" if _is_blank(name) else str(name).strip(),
        email="" if _is_blank(email) else str(email).strip(),
        available_dates=dates,
    )


def people_from_rows(rows: Iterable[Sequence[Any]]) -> list[Person]:
    """Parse every row eagerly; any bad date aborts before anything is returned."""
    people: list[Person] = []
    for i, row in enumerate(rows):
        if len(row) != 3:
            raise ValueError(
                f"Row {i + 1} must have (name, email, dates); got {len(row)} fields."
            )
        people.append(person_from_row(row[0], row[1], row[2], position=i + 1))
    return people


def people_from_csv(path: str | Path) -> InputData:
    """
    Load a form-responses export.

    Columns are matched case-insensitively: name, email (or contact) and dates
    (or available_dates / availability). An optional capacity column is read
    from its first non-blank cell.
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"Signup CSV file not found: {file_path}")

    df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    cols = {str(c).strip().lower(): c for c in df.columns}

    name_col = _pick_column(cols, NAME_COLUMNS, file_path)
    email_col = _pick_column(cols, EMAIL_COLUMNS, file_path)
    dates_col = _pick_column(cols, DATES_COLUMNS, file_path)

    rows = df[[name_col, email_col, dates_col]].itertuples(index=False, name=None)
    people = people_from_rows(rows)

    capacity = None
    cap_col = next((cols[c] for c in CAPACITY_COLUMNS if c in cols), None)
    if cap_col is not None:
        filled = [v for v in df[cap_col].tolist() if not _is_blank(v)]
        if filled:
            capacity = parse_capacity(filled[0])

    return InputData(people=people, capacity=capacity)


def people_from_json(path: str | Path) -> InputData:
    """
    Load signups from a JSON file on disk.

    Files may contain either a list of people objects or an object with a
    top-level `people`/`volunteers` array and an optional `capacity`.
    Each person's `dates` may be a comma-separated string or a list of tokens.
    """
    file_path = Path(path).expanduser()

    if file_path.suffix.lower() != ".json":
        raise ValueError("people_from_json expects a path to a .json file.")
    if not file_path.exists():
        raise FileNotFoundError(f"Signup JSON file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {file_path}") from exc

    capacity = None
    if isinstance(data, Mapping):
        entries = data.get("people")
        if entries is None:
            entries = data.get("volunteers")
        if entries is None:
            raise ValueError("JSON file must contain a list or a 'people' key.")
        if data.get("capacity") is not None:
            capacity = parse_capacity(data["capacity"])
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        entries = data
    else:
        raise TypeError("JSON file must contain a list of people objects.")

    people: list[Person] = []
    for i, raw in enumerate(entries):
        if not isinstance(raw, Mapping):
            raise TypeError("Each person entry must be an object/dict.")
        dates = raw.get("dates", raw.get("available_dates", ""))
        if isinstance(dates, (list, tuple)):
            dates = ", ".join(str(d) for d in dates)
        people.append(
            person_from_row(
                raw.get("name"), raw.get("email", raw.get("contact")), dates, i + 1
            )
        )

    return InputData(people=people, capacity=capacity)


def load_input(path: str | Path) -> InputData:
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return people_from_csv(path)
    if suffix == ".json":
        return people_from_json(path)
    raise ValueError(f"Unsupported input file type {suffix!r}; use .csv or .json")


def _pick_column(cols: dict[str, Any], choices: Sequence[str], path: Path) -> Any:
    for c in choices:
        if c in cols:
            return cols[c]
    raise ValueError(f"{path} is missing a column named one of {list(choices)}")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()
