from accounts.stores.django_store import DjangoUserStore
from accounts.stores.interfaces import UserStore

__all__ = ["UserStore", "DjangoUserStore"]
