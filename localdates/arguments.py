"""
Argument checks shared by the generator constructors.

Failures raise hypothesis' ``InvalidArgument`` so they read the same as
argument errors raised by hypothesis strategies themselves.
"""

from numbers import Integral

from hypothesis.errors import InvalidArgument


def check_arguments(condition: bool, message: str, *args) -> None:
    """Raise InvalidArgument with a formatted message when condition is false.
    
    Args:
        condition: Result of the check
        message: %-style message template
        *args: Values interpolated into the message
        
    Raises:
        InvalidArgument: If condition is false
    """
    if not condition:
        raise InvalidArgument(message % args)


def is_integral(value) -> bool:
    """Check that a value is an integer, including numpy integers (bools excluded)."""
    return isinstance(value, Integral) and not isinstance(value, bool)
