"""Project-level configuration from pyproject.toml.

Reads the [tool.trigraph] section of an explicitly given file. Nothing in the
library reads configuration on its own; callers opt in with
``trigraph.configure(path)``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrigraphConfig:
    """Configuration from [tool.trigraph] in pyproject.toml."""

    random_seed: int | None = None


def load_config(path: str | Path) -> TrigraphConfig:
    """Load [tool.trigraph] from the given pyproject.toml.

    Args:
        path: Path to a pyproject.toml file

    Returns:
        The parsed config, or the defaults if there is no [tool.trigraph]
        section

    Raises:
        FileNotFoundError: If path does not exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib

    path = Path(path)
    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("trigraph", {})
    seed = section.get("random-seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        logger.warning("Ignoring non-integer [tool.trigraph] random-seed %r in %s", seed, path)
        seed = None

    return TrigraphConfig(random_seed=seed)
