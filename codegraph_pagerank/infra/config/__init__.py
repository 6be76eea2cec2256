from .settings import PageRankSettings, get_settings

__all__ = ["PageRankSettings", "get_settings"]
