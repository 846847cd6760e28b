from fav_core.config import FavConfig, load_fav_config
from fav_core.db.store import Store
from fav_core.home import FavPaths, ensure_fav_layout, resolve_fav_home
from fav_core.paths import normalize_path
from fav_core.resolve import ById, ByName, ByRecord, ResolutionService
from fav_core.service import FavService

__version__ = "0.1.0"

__all__ = [
    "ById",
    "ByName",
    "ByRecord",
    "FavConfig",
    "FavPaths",
    "FavService",
    "ResolutionService",
    "Store",
    "__version__",
    "ensure_fav_layout",
    "load_fav_config",
    "normalize_path",
    "resolve_fav_home",
]
