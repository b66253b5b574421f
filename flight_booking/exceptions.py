"""Domain errors raised by the booking registry and service."""


class FlightBookingError(Exception):
    """Raised when a booking command cannot be carried out."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FlightFullError(FlightBookingError):
    """Raised when a booking is attempted against a flight with no seats left."""

    def __init__(self, flight_id: int):
        super().__init__(f"Flight with ID {flight_id} is full. Cannot book.")
        self.flight_id = flight_id
