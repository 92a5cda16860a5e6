"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from scheduling.models import Booking, BookingSession, Venue
from scheduling.services.scheduling_service import BOOKINGS_CACHE_KEY, VENUES_CACHE_KEY


@receiver([post_save, post_delete], sender=Booking)
def invalidate_booking_cache(sender, instance, **kwargs):
    """Invalidate the booking list when a booking is saved or deleted."""
    cache.delete(BOOKINGS_CACHE_KEY)


@receiver([post_save, post_delete], sender=BookingSession)
def invalidate_session_cache(sender, instance, **kwargs):
    """Invalidate the booking list when a session is saved or deleted."""
    cache.delete(BOOKINGS_CACHE_KEY)


@receiver([post_save, post_delete], sender=Venue)
def invalidate_venue_cache(sender, instance, **kwargs):
    """Invalidate the venue list when a venue is saved or deleted."""
    cache.delete(VENUES_CACHE_KEY)
