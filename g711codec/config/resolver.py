"""Locate the YAML file that holds transcoding options."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Looked up in this order; the first existing file wins
DEFAULT_CONFIG_NAMES = (
    "g711.yaml",
    "g711.yml",
)


class ConfigResolver:
    """Pick the configuration file for a command.

    An explicit ``--config`` path always wins and must exist. Otherwise the
    search directory (the working directory unless given) is checked for
    ``g711.yaml`` then ``g711.yml``. With neither, options come from the
    built-in defaults and ``resolve`` returns None.
    """

    def __init__(self, explicit_path: Path | None = None, *, search_dir: Path | None = None) -> None:
        self.explicit_path = explicit_path
        self.search_dir = search_dir

    @property
    def directory(self) -> Path:
        return self.search_dir if self.search_dir is not None else Path.cwd()

    def resolve(self) -> Path | None:
        """Return the configuration file to load, or None for defaults.

        Raises:
            FileNotFoundError: If ``explicit_path`` is given but is not a file
        """
        if self.explicit_path is not None:
            if not self.explicit_path.is_file():
                raise FileNotFoundError(f"Configuration file not found: {self.explicit_path}")
            return self.explicit_path

        for name in DEFAULT_CONFIG_NAMES:
            candidate = self.directory / name
            if candidate.is_file():
                logger.debug(f"Using configuration file {candidate}")
                return candidate

        logger.debug(f"No {' or '.join(DEFAULT_CONFIG_NAMES)} in {self.directory}; using built-in defaults")
        return None

    def default_path(self) -> Path:
        """Return where ``init-config`` writes a new file."""
        return self.directory / DEFAULT_CONFIG_NAMES[0]
