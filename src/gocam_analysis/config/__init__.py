from .loader import load_config, load_config_with_overrides
from .schema import AnalysisConfig, EnablerPrefixes

__all__ = [
    "load_config",
    "load_config_with_overrides",
    "AnalysisConfig",
    "EnablerPrefixes",
]
