__all__ = ['SunposException', 'DomainError', 'InputRangeError']


class SunposException(Exception):
    """Base class for all exceptions raised by the sunpos package."""
    pass


class DomainError(SunposException, ValueError):
    """Raised when an inverse trigonometric function receives an argument outside [-1, 1], or an angle is not
    finite."""
    pass


class InputRangeError(SunposException, ValueError):
    """Raised when a year falls outside the window the day count arithmetic is valid for."""
    pass
