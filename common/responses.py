# common/responses.py
"""
Response envelopes shared by every JSON endpoint.

    success: {"success": true,  "message", "statusCode", "data", "timestamp"}
    failure: {"success": false, "error": {"message", "statusCode", "timestamp", "details"?}}
"""
from decimal import Decimal

from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse
from django.utils import timezone


class EnvelopeEncoder(DjangoJSONEncoder):
    """DjangoJSONEncoder, but money goes out as a JSON number."""

    def default(self, o):
        if isinstance(o, Decimal):
            return float(o)
        return super().default(o)


def _timestamp():
    return timezone.now().isoformat()


def success_response(data, message="Operation successful", status=200):
    payload = {
        "success": True,
        "message": message,
        "statusCode": status,
        "data": data,
        "timestamp": _timestamp(),
    }
    return JsonResponse(payload, status=status, encoder=EnvelopeEncoder, safe=False)


def error_response(message, status=500, details=None):
    error = {
        "message": message,
        "statusCode": status,
        "timestamp": _timestamp(),
    }
    if details:
        error["details"] = details
    return JsonResponse({"success": False, "error": error}, status=status, encoder=EnvelopeEncoder)


def form_error_response(form):
    """400 envelope for a failed Django form: joined message plus per-field errors."""
    errors = form.errors.get_json_data()
    message = ", ".join(
        item["message"] for field_errors in errors.values() for item in field_errors
    )
    return error_response(
        message or "Invalid request",
        status=400,
        details={"validationErrors": errors},
    )
