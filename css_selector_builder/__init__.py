# css_selector_builder/__init__.py
from .validators import SelectorValidator, SelectorCategory, SelectorPart
from .builder import SelectorBuilder, CssSelectorBuilder, Combinator, css_selector_builder
from .models import Rectangle
from .serialization import (
    DecoderRegistry,
    JsonCodec,
    default_registry,
    serialize,
    deserialize,
    load
)
from .exceptions import (
    ValidationError,
    ParseError,
    DuplicateSelectorPart,
    OutOfOrderSelectorPart,
    UnknownSelectorCategory,
    UnregisteredTypeError
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorBuilder",
    "CssSelectorBuilder",
    "SelectorValidator",
    "SelectorCategory",
    "SelectorPart",
    "Combinator",
    "Rectangle",
    "DecoderRegistry",
    "JsonCodec",

    # Ready-made instances
    "css_selector_builder",
    "default_registry",

    # Exceptions
    "ValidationError",
    "ParseError",
    "DuplicateSelectorPart",
    "OutOfOrderSelectorPart",
    "UnknownSelectorCategory",
    "UnregisteredTypeError",

    # Serialization functions
    "serialize",
    "deserialize",
    "load"
]
