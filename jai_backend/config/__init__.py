from jai_backend.config.settings import Config

__all__ = ["Config"]
