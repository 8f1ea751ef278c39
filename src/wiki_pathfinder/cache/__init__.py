from .link_cache import LinkCache
from .persistence import PersistenceWorker, WriteLinksCommand

__all__ = ["LinkCache", "PersistenceWorker", "WriteLinksCommand"]
