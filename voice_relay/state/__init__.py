from .runtime import RuntimeDeps
from .settings import AppSettings
from .services import RelayServices

__all__ = ["AppSettings", "RelayServices", "RuntimeDeps"]
