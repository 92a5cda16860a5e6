"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for scheduling logic
- Map domain errors to HTTP responses
- Never contain scheduling logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from scheduling.domain.errors import DomainError, ErrorCode
from scheduling.handlers.serializers import (
    BatchConflictCheckSerializer,
    CalendarCellSerializer,
    ConflictCheckSerializer,
    ConflictDescriptorSerializer,
    DateRangeConflictsSerializer,
    DatedConflictSerializer,
    DayGroupSerializer,
    OccurrenceSerializer,
    SessionConflictSerializer,
    SessionSerializer,
    VenueSerializer,
    ViolationSerializer,
)
from scheduling.services import SchedulingService
from scheduling.stores import DjangoBookingStore

NOT_FOUND_CODES = {ErrorCode.BOOKING_NOT_FOUND}


def get_service() -> SchedulingService:
    return SchedulingService(DjangoBookingStore())


def error_response(error: DomainError) -> Response:
    code = status.HTTP_404_NOT_FOUND if error.code in NOT_FOUND_CODES else status.HTTP_400_BAD_REQUEST
    return Response({"code": error.code.value, "message": error.message}, status=code)


class VenueListView(APIView):
    """Handler for GET /api/venues"""

    def get(self, request: Request) -> Response:
        venues = get_service().list_venues()
        return Response(VenueSerializer(venues, many=True).data)


class SessionValidationView(APIView):
    """Handler for POST /api/sessions/validate"""

    def post(self, request: Request) -> Response:
        serializer = SessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        violations = get_service().validate_session(serializer.to_session())
        return Response(
            {
                "valid": not violations,
                "violations": ViolationSerializer(violations, many=True).data,
            }
        )


class ConflictCheckView(APIView):
    """Handler for POST /api/conflicts/check"""

    def post(self, request: Request) -> Response:
        serializer = ConflictCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            conflicts = get_service().check_conflicts(
                venue=data["venue"],
                day=data["date"],
                start_time=data["start_time"],
                end_time=data["end_time"],
                all_day=data["all_day"],
                exclude_booking_id=data["exclude_booking_id"],
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            {
                "has_conflicts": bool(conflicts),
                "conflicts": ConflictDescriptorSerializer(conflicts, many=True).data,
            }
        )


class BatchConflictCheckView(APIView):
    """Handler for POST /api/conflicts/check-batch"""

    def post(self, request: Request) -> Response:
        serializer = BatchConflictCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            conflicts = get_service().check_conflicts_batch(
                days=data["dates"],
                venues=data["venues"],
                exclude_booking_id=data["exclude_booking_id"],
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            {
                "has_conflicts": bool(conflicts),
                "conflicts": DatedConflictSerializer(conflicts, many=True).data,
            }
        )


class VenueConflictsView(APIView):
    """Handler for GET /api/calendar/{date}/venue-conflicts"""

    def get(self, request: Request, day: str) -> Response:
        try:
            venues = get_service().venue_conflicts_for_date(day)
        except DomainError as error:
            return error_response(error)
        return Response({"date": day, "venues": venues})


class MonthCalendarView(APIView):
    """Handler for GET /api/calendar/{year}/{month}"""

    def get(self, request: Request, year: int, month: int) -> Response:
        try:
            cells = get_service().month(
                year,
                month,
                venue=request.query_params.get("venue"),
                status=request.query_params.get("status"),
                search=request.query_params.get("search"),
            )
        except DomainError as error:
            return error_response(error)
        return Response(CalendarCellSerializer(cells, many=True).data)


class BookingOccurrencesView(APIView):
    """Handler for GET /api/bookings/{booking_id}/occurrences"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            occurrences = get_service().occurrences(booking_id)
        except DomainError as error:
            return error_response(error)
        return Response(OccurrenceSerializer(occurrences, many=True).data)


class BookingSessionDaysView(APIView):
    """Handler for GET /api/bookings/{booking_id}/session-days"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            groups, numbers = get_service().session_days(booking_id)
        except DomainError as error:
            return error_response(error)
        return Response(
            {
                "groups": DayGroupSerializer(groups, many=True).data,
                "session_numbers": numbers,
            }
        )


class BookingConflictsView(APIView):
    """Handler for GET /api/bookings/{booking_id}/conflicts"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            conflicts = get_service().booking_conflicts(booking_id)
        except DomainError as error:
            return error_response(error)
        return Response(SessionConflictSerializer(conflicts, many=True).data)


class BookingDateConflictsView(APIView):
    """Handler for GET /api/bookings/{booking_id}/date-conflicts"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            result = get_service().date_conflicts(booking_id)
        except DomainError as error:
            return error_response(error)
        return Response(DateRangeConflictsSerializer(result).data)
