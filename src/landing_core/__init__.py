from landing_core.config import CoreConfig, load_core_config
from landing_core.home import LandingPaths, ensure_landing_layout, resolve_landing_home

__version__ = "0.1.0"

__all__ = [
    "CoreConfig",
    "LandingPaths",
    "__version__",
    "ensure_landing_layout",
    "load_core_config",
    "resolve_landing_home",
]
