"""Store ports — backing-store and adapter protocols."""

from cachefly.store.ports.outbound import MapLikeStore, StoreAdapter

__all__ = ["MapLikeStore", "StoreAdapter"]
