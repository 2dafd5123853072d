"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPaymentMethodDataError(DomainException):
    """Payment method record is missing data required to display it"""

    pass
