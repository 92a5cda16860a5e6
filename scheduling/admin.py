from django.contrib import admin

from scheduling.models import Booking, BookingSession, Venue


class BookingSessionInline(admin.TabularInline):
    model = BookingSession
    extra = 1


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "capacity", "area"]
    search_fields = ["name"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["booking_number", "client_name", "event_date", "event_end_date", "status"]
    list_filter = ["status", "hall"]
    search_fields = ["booking_number", "client_name"]
    inlines = [BookingSessionInline]


@admin.register(BookingSession)
class BookingSessionAdmin(admin.ModelAdmin):
    list_display = ["session_name", "booking", "venue", "session_date", "start_time", "end_time"]
    list_filter = ["venue", "session_label"]
