from .digest import ALGORITHM_ALIASES, calculate_digest

__all__ = ["ALGORITHM_ALIASES", "calculate_digest"]
