from .config import Config, cfg
from .errors import ConfigurationError, DuplicateIdentity, ParseError
from .input_data import InputData, load_input
from .main import run_allocation
from .volunteer import Person

__all__ = [
    "Config",
    "cfg",
    "ConfigurationError",
    "DuplicateIdentity",
    "ParseError",
    "InputData",
    "load_input",
    "Person",
    "run_allocation",
]
