# bookings/views.py
from functools import wraps

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from common.pagination import paginate
from common.responses import error_response, form_error_response, success_response
from common.utils import parse_json_body

from .exceptions import BookingError
from .forms import BookingFilterForm, BookingForm, BookingStatusForm, CustomerBookingsForm
from .models import ACTIVE_STATUSES, Booking, BookingStatus
from .services.admission import admit_booking, cancel_booking, get_booking, update_booking_status


def renders_booking_errors(view):
    """Turn a BookingError raised by the engine into the JSON error envelope."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except BookingError as e:
            return error_response(e.message, status=e.status_code, details=e.details)
    return wrapper


# =========================
# /api/bookings
# =========================
@csrf_exempt
@require_http_methods(["GET", "POST"])
def bookings_collection(request):
    if request.method == "POST":
        return create_booking(request)
    return list_bookings(request)


@renders_booking_errors
def create_booking(request):
    form = BookingForm(parse_json_body(request))
    if not form.is_valid():
        return form_error_response(form)

    data = form.cleaned_data
    booking = admit_booking(
        vehicle_id=data["vehicleId"],
        customer_id=data["customerId"],
        from_pincode=data["fromPincode"],
        to_pincode=data["toPincode"],
        start_time=data["startTime"],
    )
    return success_response(booking.to_dict(), "Booking created successfully", status=201)


def list_bookings(request):
    form = BookingFilterForm(request.GET)
    if not form.is_valid():
        return form_error_response(form)
    f = form.cleaned_data

    qs = Booking.objects.select_related("vehicle")
    if f["customerId"]:
        qs = qs.filter(customer_id=f["customerId"])
    if f["vehicleId"]:
        qs = qs.filter(vehicle_id=f["vehicleId"])
    if f["status"]:
        qs = qs.filter(status=f["status"])
    if f["fromDate"]:
        qs = qs.filter(start_time__gte=f["fromDate"])
    if f["toDate"]:
        qs = qs.filter(start_time__lte=f["toDate"])

    items, pagination = paginate(
        qs.order_by("-created_at", "-id"), f["page"], f["limit"], total_key="totalBookings",
    )
    return success_response(
        {"bookings": [b.to_dict() for b in items], "pagination": pagination},
        "Bookings retrieved successfully",
    )


# =========================
# /api/bookings/customer/<customer_id>
# =========================
@require_GET
def customer_bookings_view(request, customer_id):
    form = CustomerBookingsForm(request.GET)
    if not form.is_valid():
        return form_error_response(form)
    limit = form.cleaned_data["limit"] or 10
    status = form.cleaned_data["status"]

    history = Booking.objects.filter(customer_id=customer_id)
    qs = history.select_related("vehicle")
    if status:
        qs = qs.filter(status=status)
    bookings = qs.order_by("-created_at", "-id")[:limit]

    stats = {
        "totalBookings": history.count(),
        "completedBookings": history.filter(status=BookingStatus.COMPLETED).count(),
        "activeBookings": history.filter(status__in=ACTIVE_STATUSES).count(),
    }
    return success_response(
        {"bookings": [b.to_dict() for b in bookings], "stats": stats},
        "Customer bookings retrieved successfully",
    )


# =========================
# /api/bookings/<pk>
# =========================
@csrf_exempt
@require_http_methods(["GET", "DELETE"])
@renders_booking_errors
def booking_detail_view(request, pk):
    if request.method == "DELETE":
        booking = cancel_booking(pk)
        return success_response(booking.to_dict(), "Booking cancelled successfully")

    booking = get_booking(pk)
    return success_response(booking.to_dict(), "Booking details retrieved successfully")


@csrf_exempt
@require_http_methods(["PATCH"])
@renders_booking_errors
def booking_status_view(request, pk):
    form = BookingStatusForm(parse_json_body(request))
    if not form.is_valid():
        return form_error_response(form)

    status = form.cleaned_data["status"]
    booking = update_booking_status(pk, status)
    return success_response(booking.to_dict(), f"Booking status updated to {status}")
