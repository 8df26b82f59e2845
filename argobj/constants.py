"""
Layout constants and resource limits.
"""

# Column at which a wrapped long description is re-flowed
LONG_DESCRIPTION_WIDTH = 78

# Leading spaces of every line in a choice block
CHOICE_INDENT = 5

# Maximum config file size (10MB)
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024
