"""Core configuration and precondition components"""

from .config_loader import StackConfig, load_stack_config, resolve_root

__all__ = [
    "StackConfig",
    "load_stack_config",
    "resolve_root",
]
