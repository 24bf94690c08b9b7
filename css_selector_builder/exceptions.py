class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class DuplicateSelectorPart(ValidationError):
    """Element, id or pseudo-element appended more than once."""
    pass

class OutOfOrderSelectorPart(ValidationError):
    """Selector part appended after a part that must follow it."""
    pass

class UnknownSelectorCategory(ValidationError, ValueError):
    """Category name that does not map to a selector part kind."""
    pass

class UnregisteredTypeError(ParseError, LookupError):
    """No decoder registered for the requested type."""
    pass
