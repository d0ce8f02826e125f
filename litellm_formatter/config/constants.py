"""
Formatter defaults and environment variable names.

The defaults mirror the workflow node parameters the formatter was built
for; every value can be overridden per call or through the environment.
"""

DEFAULT_INPUT_FIELD = "data"
DEFAULT_OUTPUT_FIELD = "data"
DEFAULT_PROCESS_ALL_ITEMS = True
DEFAULT_STRICT_MODE = False

# Environment overrides (see FormatterOptions.from_env)
ENV_PREFIX = "LITELLM_FORMATTER_"
INPUT_FIELD_ENV_VAR = ENV_PREFIX + "INPUT_FIELD"
OUTPUT_FIELD_ENV_VAR = ENV_PREFIX + "OUTPUT_FIELD"
PROCESS_ALL_ITEMS_ENV_VAR = ENV_PREFIX + "PROCESS_ALL_ITEMS"
STRICT_MODE_ENV_VAR = ENV_PREFIX + "STRICT_MODE"

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})
