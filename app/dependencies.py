"""FastAPI dependencies shared by the routers."""

from app.stores.platforms import PlatformStore
from app.stores.users import UserStore

_user_store = UserStore()
_platform_store = PlatformStore()


def get_user_store() -> UserStore:
    return _user_store


def get_platform_store() -> PlatformStore:
    return _platform_store
