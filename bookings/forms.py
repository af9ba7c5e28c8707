from django import forms
from django.core.validators import RegexValidator
from django.utils import timezone

from .models import BookingStatus

PINCODE_ERRORS = {
    "required": "Pincode is required",
}


class PincodeField(forms.CharField):
    default_validators = [RegexValidator(r"^\d{6}$", "Pincode must be exactly 6 digits")]

    def __init__(self, **kwargs):
        kwargs.setdefault("strip", True)
        kwargs.setdefault("error_messages", PINCODE_ERRORS)
        super().__init__(**kwargs)


class FutureDateTimeField(forms.DateTimeField):
    """ISO 8601 timestamp that must lie strictly in the future."""

    def validate(self, value):
        super().validate(value)
        if value is not None and value <= timezone.now():
            raise forms.ValidationError("Start time must be in the future", code="past")


class AvailabilityForm(forms.Form):
    capacityRequired = forms.IntegerField(
        min_value=1,
        max_value=50000,
        error_messages={
            "required": "Required capacity is required",
            "invalid": "Required capacity must be a number",
            "min_value": "Required capacity must be at least 1 kg",
            "max_value": "Required capacity cannot exceed 50,000 kg",
        },
    )
    fromPincode = PincodeField()
    toPincode = PincodeField()
    startTime = FutureDateTimeField(
        error_messages={
            "required": "Start time is required",
            "invalid": "Start time must be a valid ISO date",
        },
    )


class BookingForm(forms.Form):
    vehicleId = forms.IntegerField(
        min_value=1,
        error_messages={
            "required": "Vehicle ID is required",
            "invalid": "Vehicle ID must be a valid identifier",
            "min_value": "Vehicle ID must be a valid identifier",
        },
    )
    customerId = forms.CharField(
        min_length=1,
        max_length=50,
        strip=True,
        error_messages={
            "required": "Customer ID is required",
            "max_length": "Customer ID cannot exceed 50 characters",
        },
    )
    fromPincode = PincodeField()
    toPincode = PincodeField()
    startTime = FutureDateTimeField(
        error_messages={
            "required": "Start time is required",
            "invalid": "Start time must be a valid ISO date",
        },
    )


class BookingStatusForm(forms.Form):
    status = forms.ChoiceField(
        choices=BookingStatus.choices,
        error_messages={
            "required": "Status is required",
            "invalid_choice": "Invalid status. Must be one of: " + ", ".join(BookingStatus.values),
        },
    )


class BookingFilterForm(forms.Form):
    customerId = forms.CharField(max_length=50, required=False)
    vehicleId = forms.IntegerField(min_value=1, required=False)
    status = forms.ChoiceField(choices=BookingStatus.choices, required=False)
    fromDate = forms.DateTimeField(required=False)
    toDate = forms.DateTimeField(required=False)
    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, required=False)


class CustomerBookingsForm(forms.Form):
    status = forms.ChoiceField(choices=BookingStatus.choices, required=False)
    limit = forms.IntegerField(min_value=1, max_value=100, required=False)
