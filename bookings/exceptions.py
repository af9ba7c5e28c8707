# bookings/exceptions.py
"""
Typed outcomes of the booking engine. Views turn them into the error
envelope using ``status_code``; the engine itself knows nothing about HTTP
beyond that attribute.
"""


class BookingError(Exception):
    status_code = 400
    default_message = "Booking request rejected"

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class NotFound(BookingError):
    status_code = 404
    default_message = "Resource not found"


class NotAvailable(BookingError):
    default_message = "Vehicle is not available for booking"


class Conflict(BookingError):
    status_code = 409
    default_message = "Vehicle is already booked for the requested time slot"

    def __init__(self, count, message=None):
        self.count = count
        super().__init__(
            message,
            details={
                "conflictingBookings": count,
                "suggestedAction": "Please search for available vehicles again",
            },
        )


class InvalidState(BookingError):
    default_message = "Operation not allowed in the current booking state"


class TooLate(BookingError):
    default_message = "Cannot cancel booking within 1 hour of start time"


class InvalidRequest(BookingError):
    default_message = "Booking data failed validation"
