"""
Global configuration for bite.

Settings are read from the environment once, at import time.
"""

import logging
import os

_SUPPORTED_BITE_ENVS: list[str] = ["prod", "test"]

BITE_ENV = os.environ.get("BITE_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if BITE_ENV not in _SUPPORTED_BITE_ENVS:
    raise ValueError(
        f"Invalid BITE_ENV environment variable: '{BITE_ENV}'. "
        f"Supported values: {_SUPPORTED_BITE_ENVS}"
    )

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

BITE_LOG_LEVEL = os.environ.get("BITE_LOG_LEVEL", "INFO").upper()
"""Log level of the command-line tool when `--verbose` is not given."""

if BITE_LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid BITE_LOG_LEVEL environment variable: '{BITE_LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )


def log_level(verbose: bool = False) -> int:
    """Return the numeric log level, DEBUG when `verbose` is set."""
    if verbose:
        return logging.DEBUG
    return logging.getLevelName(BITE_LOG_LEVEL)
