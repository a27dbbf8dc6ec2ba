from snapshare.middlewares.logging_middleware import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
