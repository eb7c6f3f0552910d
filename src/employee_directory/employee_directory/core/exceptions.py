class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DepartmentNotFoundError(DomainError):
    """Raised when a department has no employees in the directory."""

    def __init__(self, department: str):
        super().__init__(f"Department: {department} not found")
        self.department = department


class EmptySampleError(ValidationError):
    """Raised when a statistic is requested over an empty sample."""
