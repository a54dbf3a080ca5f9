"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class DoctorNotFoundException(NotFoundException):
    """Referenced doctor is not in the directory."""

    def __init__(self, doctor_id: str):
        """Initialize with the unknown doctor id."""
        self.doctor_id = doctor_id
        super().__init__(f"Doctor not found: {doctor_id}")


class ConflictException(AppException):
    """Conflict exception."""

    def __init__(self, message: str = "Conflict"):
        """Initialize with 409 status code."""
        super().__init__(message, status_code=409)


class ValidationException(AppException):
    """Validation error exception."""

    def __init__(self, message: str = "Validation error"):
        """Initialize with 422 status code."""
        super().__init__(message, status_code=422)


class AIServiceException(AppException):
    """Generative AI service failed or returned an unusable response."""

    def __init__(self, message: str = "AI service request failed"):
        """Initialize with 502 status code."""
        super().__init__(message, status_code=502)


class AIConfigurationException(AppException):
    """Generative AI service is not configured."""

    def __init__(self, message: str = "AI service is not configured"):
        """Initialize with 503 status code."""
        super().__init__(message, status_code=503)
