"""
Figurecast Errors
=================

Bounded Context: Error Taxonomy

All codec failures derive from FigureCastError so a host transport can
catch the whole family in one place and decide whether to drop the message,
log it, or close the session.

Types:
- EncodingError: Figure value missing or not representable as JSON text
- DecodingError: Inbound text is not well-formed JSON
- LifecycleViolation: Codec used outside its READY state
"""


class FigureCastError(Exception):
    """Base class for figurecast errors."""
    pass


class EncodingError(FigureCastError):
    """Raised when a figure cannot be rendered as JSON text."""
    pass


class DecodingError(FigureCastError):
    """Raised when inbound text cannot be parsed into a figure."""
    pass


class LifecycleViolation(FigureCastError):
    """Raised when a codec is used before init() or after destroy()."""
    pass
