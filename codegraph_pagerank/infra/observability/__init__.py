from .logging import LogPerformance, get_logger, log_performance, setup_logging

__all__ = ["get_logger", "setup_logging", "log_performance", "LogPerformance"]
