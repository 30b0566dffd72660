"""
Configuration settings for patch application.

This module provides centralized configuration for the hunk search parameters
that can be adjusted through the environment.
"""

import os

# Search window settings for finding the hunk position
DEFAULT_SEARCH_WINDOW = 200       # Lines scanned on either side of the declared position

# Reject hunks whose body disagrees with the counts in their @@ header
DEFAULT_STRICT_COUNTS = False

# Environment variable names for configuration overrides
ENV_PREFIX = "PATCHMATE_"
ENV_SEARCH_WINDOW = f"{ENV_PREFIX}SEARCH_WINDOW"
ENV_STRICT_COUNTS = f"{ENV_PREFIX}STRICT_COUNTS"


def get_config_value(env_var: str, default_value):
    """
    Get a configuration value from environment variable or use default.

    Args:
        env_var: The environment variable name
        default_value: The default value to use if env var is not set

    Returns:
        The configuration value
    """
    value = os.environ.get(env_var)
    if value is None:
        return default_value

    # Try to convert to the same type as default_value
    try:
        if isinstance(default_value, bool):
            return value.strip().lower() in ('true', 'yes', '1', 'y')
        elif isinstance(default_value, int):
            return int(value)
        elif isinstance(default_value, float):
            return float(value)
        else:
            return value
    except (ValueError, TypeError):
        return default_value


def get_search_window() -> int:
    """Get the configured search window, never negative."""
    return max(0, get_config_value(ENV_SEARCH_WINDOW, DEFAULT_SEARCH_WINDOW))


def is_strict_counts_enabled() -> bool:
    """Check if declared hunk counts should be enforced."""
    return get_config_value(ENV_STRICT_COUNTS, DEFAULT_STRICT_COUNTS)
