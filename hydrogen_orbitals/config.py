"""
Orbital Selection Files

Reads lists of (n, l, m) triples from JSON or YAML files:

    orbitals:
      - [1, 0, 0]
      - [2, 1, -1]
"""

import json
import logging
from pathlib import Path

import yaml

from .quantum_constants import validate_quantum_numbers

log = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when an orbital selection file cannot be used."""


def load_orbitals(path_config):
    """
    Load and validate the orbitals listed in a JSON or YAML file.

    Args:
        path_config: Path to a .json, .yaml or .yml file

    Returns:
        list[tuple[int, int, int]]: The (n, l, m) triples in file order

    Raises:
        ConfigError: If the file type is unknown or the content is malformed
        InvalidQuantumNumbers: If a listed triple is not a valid orbital
    """
    path = Path(path_config)
    match path.suffix:
        case ".json":
            with open(path, encoding="utf-8") as data:
                try:
                    config = json.load(data)
                except json.JSONDecodeError as e:
                    raise ConfigError(f"Could not parse config file {path}: {e}") from e
        case ".yaml" | ".yml":
            with open(path, encoding="utf-8") as data:
                try:
                    config = yaml.safe_load(data)
                except yaml.YAMLError as e:
                    raise ConfigError(f"Could not parse config file {path}: {e}") from e
        case _:
            raise ConfigError(
                "The provided config file needs to be a json or yaml file!"
            )

    if not isinstance(config, dict) or not isinstance(config.get("orbitals"), list):
        raise ConfigError(f"Config file {path} has no 'orbitals' list.")

    orbitals = []
    for entry in config["orbitals"]:
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise ConfigError(f"Expected an [n, l, m] triple, got {entry!r}")
        n, l, m = entry
        validate_quantum_numbers(n, l, m)
        orbitals.append((n, l, m))

    log.debug("Loaded %d orbitals from %s", len(orbitals), path)
    return orbitals
