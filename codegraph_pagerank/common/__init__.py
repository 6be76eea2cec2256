from .exceptions import ConfigurationError, MalformedGraphError, PageRankError

__all__ = ["PageRankError", "ConfigurationError", "MalformedGraphError"]
