# vehicles/views.py
from django.conf import settings
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from bookings.exceptions import NotFound
from bookings.forms import AvailabilityForm
from bookings.models import ACTIVE_STATUSES, Booking
from bookings.services.availability import find_available
from bookings.views import renders_booking_errors
from common.pagination import paginate
from common.responses import form_error_response, success_response
from common.utils import parse_json_body

from .forms import VehicleFilterForm, VehicleForm, VehicleStatusForm
from .models import Vehicle


def _get_vehicle(pk):
    vehicle = Vehicle.objects.filter(pk=pk).first()
    if vehicle is None:
        raise NotFound("Vehicle not found")
    return vehicle


# =========================
# /api/vehicles
# =========================
@csrf_exempt
@require_http_methods(["GET", "POST"])
def vehicles_collection(request):
    if request.method == "POST":
        return add_vehicle(request)
    return list_vehicles(request)


def add_vehicle(request):
    form = VehicleForm(parse_json_body(request))
    if not form.is_valid():
        return form_error_response(form)

    data = form.cleaned_data
    vehicle = Vehicle(name=data["name"], capacity_kg=data["capacityKg"], tyres=data["tyres"])
    vehicle.full_clean()
    vehicle.save()
    return success_response(vehicle.to_dict(), "Vehicle added successfully", status=201)


def list_vehicles(request):
    form = VehicleFilterForm(request.GET)
    if not form.is_valid():
        return form_error_response(form)
    f = form.cleaned_data

    qs = Vehicle.objects.all()
    if f["status"]:
        qs = qs.filter(status=f["status"])
    if f["minCapacity"] is not None:
        qs = qs.filter(capacity_kg__gte=f["minCapacity"])
    if f["maxCapacity"] is not None:
        qs = qs.filter(capacity_kg__lte=f["maxCapacity"])

    items, pagination = paginate(
        qs.order_by("-created_at", "-id"), f["page"], f["limit"], total_key="totalVehicles",
    )
    return success_response(
        {"vehicles": [v.to_dict() for v in items], "pagination": pagination},
        "Vehicles retrieved successfully",
    )


# =========================
# /api/vehicles/available
# =========================
@require_GET
def available_vehicles_view(request):
    form = AvailabilityForm(request.GET)
    if not form.is_valid():
        return form_error_response(form)

    data = form.cleaned_data
    available = find_available(
        capacity_required=data["capacityRequired"],
        from_code=data["fromPincode"],
        to_code=data["toPincode"],
        requested_start=data["startTime"],
    )
    if not available and not Vehicle.objects.active_by_min_capacity(data["capacityRequired"]).exists():
        return success_response([], "No vehicles found with required capacity")

    return success_response(
        [a.to_dict() for a in available],
        f"Found {len(available)} available vehicles",
    )


# =========================
# /api/vehicles/<pk>
# =========================
@require_GET
@renders_booking_errors
def vehicle_detail_view(request, pk):
    vehicle = _get_vehicle(pk)
    bookings = Booking.objects.filter(vehicle=vehicle)
    recent = bookings.order_by("-created_at", "-id")[:settings.FLEETLINK["RECENT_BOOKINGS_LIMIT"]]

    return success_response(
        {
            "vehicle": vehicle.to_dict(),
            "recentBookings": [b.to_dict(vehicle_summary=False) for b in recent],
            "stats": {
                "totalBookings": bookings.count(),
                "activeBookings": bookings.filter(status__in=ACTIVE_STATUSES).count(),
            },
        },
        "Vehicle details retrieved successfully",
    )


@csrf_exempt
@require_http_methods(["PATCH"])
@renders_booking_errors
def vehicle_status_view(request, pk):
    form = VehicleStatusForm(parse_json_body(request))
    if not form.is_valid():
        return form_error_response(form)

    vehicle = _get_vehicle(pk)
    vehicle.status = form.cleaned_data["status"]
    vehicle.save(update_fields=["status", "updated_at"])
    return success_response(vehicle.to_dict(), f"Vehicle status updated to {vehicle.status}")
