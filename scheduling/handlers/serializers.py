"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from scheduling.domain import Session, normalize_time, to_calendar_day


def _interval(obj) -> dict[str, str]:
    return _span(obj.interval)


def _span(interval) -> dict[str, str]:
    return {"start": str(interval.start), "end": str(interval.end)}


class CalendarDayField(serializers.DateField):
    """DateField that also accepts ISO datetimes, keeping their calendar day."""

    def to_internal_value(self, value):
        day = to_calendar_day(value)
        if day is None:
            return super().to_internal_value(value)
        return day


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    capacity = serializers.IntegerField(allow_null=True)
    area = serializers.CharField()


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model, also used to read editor input."""

    id = serializers.CharField(required=False, allow_blank=True, default="")
    name = serializers.CharField(required=False, allow_blank=True, default="")
    venue = serializers.CharField(required=False, allow_blank=True, default="")
    day = CalendarDayField(required=False, allow_null=True, default=None)
    start_time = serializers.CharField(required=False, allow_blank=True, default="")
    end_time = serializers.CharField(required=False, allow_blank=True, default="")
    label = serializers.CharField(required=False, allow_blank=True, default="")
    all_day = serializers.BooleanField(required=False, default=False)
    pax_count = serializers.IntegerField(required=False, allow_null=True, default=None)
    special_instructions = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_start_time(self, value: str) -> str:
        return normalize_time(value)

    def validate_end_time(self, value: str) -> str:
        return normalize_time(value)

    def to_session(self) -> Session:
        return Session(**self.validated_data)


class ViolationSerializer(serializers.Serializer):
    field = serializers.CharField()
    code = serializers.SerializerMethodField()
    message = serializers.CharField()

    def get_code(self, obj) -> str:
        return obj.code.value


class ConflictCheckSerializer(serializers.Serializer):
    """Request body for a venue/day/time conflict check."""

    venue = serializers.CharField()
    date = serializers.CharField()
    start_time = serializers.CharField(required=False, allow_blank=True, default="")
    end_time = serializers.CharField(required=False, allow_blank=True, default="")
    all_day = serializers.BooleanField(required=False, default=False)
    exclude_booking_id = serializers.CharField(required=False, allow_null=True, default=None)


class VenueSlotSerializer(serializers.Serializer):
    venue = serializers.CharField()
    start_time = serializers.CharField(required=False, allow_blank=True, default="")
    end_time = serializers.CharField(required=False, allow_blank=True, default="")
    all_day = serializers.BooleanField(required=False, default=False)


class BatchConflictCheckSerializer(serializers.Serializer):
    """Request body for checking tentative dates against several venue slots."""

    dates = serializers.ListField(child=serializers.CharField(), allow_empty=False)
    venues = VenueSlotSerializer(many=True, allow_empty=False)
    exclude_booking_id = serializers.CharField(required=False, allow_null=True, default=None)


class ConflictDescriptorSerializer(serializers.Serializer):
    booking_id = serializers.CharField()
    booking_number = serializers.CharField()
    client_name = serializers.CharField()
    event_type = serializers.CharField()
    status = serializers.CharField()
    session_id = serializers.CharField(allow_null=True)
    session_name = serializers.CharField(allow_null=True)
    venue = serializers.CharField()
    day = serializers.DateField()
    interval = serializers.SerializerMethodField()

    def get_interval(self, obj) -> dict[str, str]:
        return _interval(obj)


class DatedConflictSerializer(serializers.Serializer):
    day = serializers.DateField()
    venue = serializers.CharField()
    requested = serializers.SerializerMethodField()
    conflict = ConflictDescriptorSerializer()

    def get_requested(self, obj) -> dict[str, str]:
        return _span(obj.requested)


class SessionConflictSerializer(serializers.Serializer):
    session_id = serializers.CharField(allow_null=True)
    session_name = serializers.CharField(allow_null=True)
    venue = serializers.CharField()
    day = serializers.DateField()
    interval = serializers.SerializerMethodField()
    conflicts = ConflictDescriptorSerializer(many=True)

    def get_interval(self, obj) -> dict[str, str]:
        return _interval(obj)


class DateRangeConflictsSerializer(serializers.Serializer):
    has_conflicts = serializers.BooleanField()
    booking_ids = serializers.SerializerMethodField()
    days = serializers.ListField(child=serializers.DateField())

    def get_booking_ids(self, obj) -> list[str]:
        return [booking.id for booking in obj.bookings]


class OccurrenceSerializer(serializers.Serializer):
    """Serializer for Occurrence domain model."""

    booking_id = serializers.CharField()
    day = serializers.DateField()
    role = serializers.SerializerMethodField()
    half = serializers.SerializerMethodField()
    day_index = serializers.IntegerField()
    total_days = serializers.IntegerField()
    day_label = serializers.CharField()

    def get_role(self, obj) -> str:
        return obj.role.value

    def get_half(self, obj) -> str:
        return obj.role.half.value


class DayGroupEntrySerializer(serializers.Serializer):
    number = serializers.IntegerField(allow_null=True)
    complete = serializers.BooleanField()
    session = SessionSerializer()


class DayGroupSerializer(serializers.Serializer):
    """Serializer for DayGroup domain model."""

    day = serializers.DateField(allow_null=True)
    day_number = serializers.IntegerField(allow_null=True)
    title = serializers.CharField()
    entries = DayGroupEntrySerializer(many=True)


class PlacementSerializer(serializers.Serializer):
    booking_id = serializers.CharField()
    client_name = serializers.CharField()
    role = serializers.SerializerMethodField()
    half = serializers.SerializerMethodField()
    day_index = serializers.IntegerField()
    total_days = serializers.IntegerField()
    conflict = serializers.BooleanField()

    def get_role(self, obj) -> str:
        return obj.role.value

    def get_half(self, obj) -> str:
        return obj.role.half.value


class CalendarCellSerializer(serializers.Serializer):
    day = serializers.DateField()
    in_month = serializers.BooleanField()
    placements = PlacementSerializer(many=True)
