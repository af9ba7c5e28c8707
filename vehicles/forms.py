from django import forms

from .models import VehicleStatus


class VehicleForm(forms.Form):
    name = forms.CharField(
        min_length=2,
        max_length=100,
        strip=True,
        error_messages={
            "required": "Vehicle name is required",
            "min_length": "Vehicle name must be at least 2 characters",
            "max_length": "Vehicle name cannot exceed 100 characters",
        },
    )
    capacityKg = forms.IntegerField(
        min_value=1,
        max_value=50000,
        error_messages={
            "required": "Vehicle capacity is required",
            "invalid": "Capacity must be a whole number",
            "min_value": "Capacity must be at least 1 kg",
            "max_value": "Capacity cannot exceed 50,000 kg",
        },
    )
    tyres = forms.IntegerField(
        min_value=2,
        max_value=18,
        error_messages={
            "required": "Number of tyres is required",
            "invalid": "Number of tyres must be an integer",
            "min_value": "Vehicle must have at least 2 tyres",
            "max_value": "Vehicle cannot have more than 18 tyres",
        },
    )


class VehicleStatusForm(forms.Form):
    status = forms.ChoiceField(
        choices=VehicleStatus.choices,
        error_messages={
            "required": "Status is required",
            "invalid_choice": "Invalid status. Must be: active, maintenance, or retired",
        },
    )


class VehicleFilterForm(forms.Form):
    status = forms.ChoiceField(choices=VehicleStatus.choices, required=False)
    minCapacity = forms.IntegerField(min_value=0, required=False)
    maxCapacity = forms.IntegerField(min_value=0, required=False)
    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, required=False)
