"""Job configuration schema and loading.

Public API:
    - GlassJobConfiguration: Root configuration model
    - PanelConfig: Cut-list entry model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_panels: Expand cut-list entries into domain panels
    - config_to_packing: Convert packing options to a PackingConfig

Example:
    >>> from pathlib import Path
    >>> from glasscut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from glasscut.application.config.adapter import (
    config_to_packing,
    config_to_panels,
    expand_panel,
)
from glasscut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from glasscut.application.config.schema import (
    SUPPORTED_VERSIONS,
    GlassJobConfiguration,
    OutputConfigSchema,
    PackingConfigSchema,
    PanelConfig,
)

__all__ = [
    "ConfigError",
    "GlassJobConfiguration",
    "OutputConfigSchema",
    "PackingConfigSchema",
    "PanelConfig",
    "SUPPORTED_VERSIONS",
    "config_to_packing",
    "config_to_panels",
    "expand_panel",
    "load_config",
    "load_config_from_dict",
]
