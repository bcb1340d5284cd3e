from radiofav.core.favorites import DEFAULT_NAME, FavoriteListStore
from radiofav.core.station import FavoriteStation

__all__ = ["DEFAULT_NAME", "FavoriteListStore", "FavoriteStation"]
