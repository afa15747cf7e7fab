"""JSON loading and saving of shift cycle configurations."""
import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from shiftcal.models.config import ShiftCycleConfig
from shiftcal.models.errors import MalformedConfigError
from shiftcal.models.validated import ValidatedCycleConfig
from shiftcal.utils.logging_setup import get_logger

logger = get_logger("shiftcal.io")


def parse_config(data: dict) -> ShiftCycleConfig:
    """
    Validate a config dictionary.

    Missing fields take the reference values. Raises MalformedConfigError
    with pydantic's message when validation fails.
    """
    try:
        validated = ValidatedCycleConfig.model_validate(data)
    except ValidationError as e:
        raise MalformedConfigError(str(e)) from e
    return validated.to_dataclass()


def load_config(path: Union[str, Path]) -> ShiftCycleConfig:
    """
    Load a shift cycle configuration from a JSON file.

    Args:
        path: JSON file with ``base_date``, ``cycle_length`` and ``shift_table``

    Returns:
        Validated ShiftCycleConfig
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedConfigError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise MalformedConfigError(f"{path}: not UTF-8 text ({e})") from e
    except OSError as e:
        raise MalformedConfigError(f"{path}: cannot read config ({e.strerror or e})") from e
    if not isinstance(data, dict):
        raise MalformedConfigError(f"{path}: expected a JSON object")
    config = parse_config(data)
    logger.info(f"Loaded cycle config from {path}: cycle_length={config.cycle_length}")
    return config


def save_config(config: ShiftCycleConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info(f"Saved cycle config to {path}")
    return path
