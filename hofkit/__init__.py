"""Higher-order function adaptors: limits, capture, construction, fixed points, infix, partial application and unpacking."""

__version__ = "0.1.0"