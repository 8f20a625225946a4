from .loader import ENV_MAX_DEPTH, FlattenConfig, load_flatten_config

__all__ = [
    "ENV_MAX_DEPTH",
    "FlattenConfig",
    "load_flatten_config",
]
