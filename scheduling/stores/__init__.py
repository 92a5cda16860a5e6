from scheduling.stores.django_store import DjangoBookingStore
from scheduling.stores.interfaces import BookingStore

__all__ = ["BookingStore", "DjangoBookingStore"]
