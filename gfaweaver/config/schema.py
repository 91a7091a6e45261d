"""
GFAWeaver v0.1.0

Configuration schema for GFAWeaver.

Defines all available configuration parameters with defaults and validation.

Author: GFAWeaver Development Team
License: MIT
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


GFA1_LINE_TYPES = ['headers', 'segments', 'links', 'containments', 'paths']
GFA2_LINE_TYPES = ['headers', 'segments', 'fragments', 'edges', 'gaps', 'groups_o', 'groups_u']
VALID_TOLERANCES = ['ignore_all', 'safe', 'pedantic']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Parser Settings
    # ========================================================================
    'parser': {
        'tolerance': 'safe',  # ignore_all | safe | pedantic
        'integer_ids': False,  # Convert segment names to integers while lexing

        # Line kinds to parse, per format
        'line_types': {
            'gfa1': {kind: True for kind in GFA1_LINE_TYPES},
            'gfa2': {kind: True for kind in GFA2_LINE_TYPES},
        },
    },

    # ========================================================================
    # Export Settings
    # ========================================================================
    'export': {
        'gfa_version': 1,  # Default output format when the suffix is ambiguous
        'overlap': '0M',  # Overlap / alignment written on L and E lines
    },

    # ========================================================================
    # Parallel Enumeration
    # ========================================================================
    'parallel': {
        'threads': None,  # None = CPU count
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                user_config = yaml.safe_load(f) or {}

            # Deep merge user config into defaults
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'strict', 'lenient')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Customize for specific templates
    if template == 'strict':
        config['parser']['tolerance'] = 'pedantic'

    elif template == 'lenient':
        config['parser']['tolerance'] = 'ignore_all'

    elif template != 'default':
        raise ValueError(f"Unknown config template: {template}")

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    # Validate parser settings
    parser = config.get('parser', {})
    tolerance = parser.get('tolerance', 'safe')
    if tolerance not in VALID_TOLERANCES:
        errors.append(f"Invalid parser tolerance: {tolerance}")

    valid_kinds = {'gfa1': GFA1_LINE_TYPES, 'gfa2': GFA2_LINE_TYPES}
    for gfa_format, kinds in parser.get('line_types', {}).items():
        if gfa_format not in valid_kinds:
            errors.append(f"Invalid line_types format: {gfa_format}")
            continue
        for kind in kinds or {}:
            if kind not in valid_kinds[gfa_format]:
                errors.append(f"Invalid {gfa_format} line type: {kind}")

    # Validate export settings
    gfa_version = config.get('export', {}).get('gfa_version', 1)
    if gfa_version not in (1, 2):
        errors.append(f"Invalid export gfa_version: {gfa_version} (must be 1 or 2)")

    # Validate thread count
    threads = config.get('parallel', {}).get('threads')
    if threads is not None and (not isinstance(threads, int) or threads < 1):
        errors.append(f"Invalid thread count: {threads}")

    # Validate log level
    level = str(config.get('logging', {}).get('level', 'INFO')).upper()
    if level not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging level: {level}")

    return errors
