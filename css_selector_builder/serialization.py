from typing import Any, Callable, Dict, Optional, Union
from pathlib import Path
import json
import logging

from pydantic_core import to_jsonable_python

from .exceptions import ParseError, UnregisteredTypeError
from .models import Rectangle
from .utils import load_json_text

logger = logging.getLogger(__name__)

Decoder = Callable[[Dict[str, Any]], Any]
Descriptor = Union[type, str]

class DecoderRegistry:
    """
    Maps a type to its decoder. Each type is also reachable through the
    name it was registered under; a name reused by another type moves to
    that type, while the first type keeps decoding as itself.
    """

    def __init__(self):
        self._decoders: Dict[type, Decoder] = {}
        self._aliases: Dict[str, type] = {}

    def register(
        self,
        cls: Optional[type] = None,
        decoder: Optional[Decoder] = None,
        name: Optional[str] = None
    ):
        """
        Register a decoder for ``cls``.

        Without ``decoder``, pydantic models decode through
        ``model_validate`` and other types through ``cls(**fields)``.
        Called with only keyword arguments it returns a class decorator.

        Returns:
            ``cls`` unchanged, so the method can decorate a class
        """
        if cls is None:
            return lambda target: self.register(target, decoder=decoder, name=name)

        alias = name or cls.__name__
        if cls in self._decoders:
            logger.warning(f"Replacing decoder registered for {cls.__qualname__}")
        previous = self._aliases.get(alias)
        if previous is not None and previous is not cls:
            logger.warning(
                f"Name {alias!r} now refers to {cls.__qualname__} instead of {previous.__qualname__}"
            )
        if decoder is None:
            decoder = self._default_decoder(cls)
        self._decoders[cls] = decoder
        self._aliases[alias] = cls
        return cls

    def decoder_for(self, descriptor: Descriptor) -> Decoder:
        """
        Look up the decoder for a registered type or name.

        Raises:
            UnregisteredTypeError: If nothing is registered for ``descriptor``
        """
        cls = descriptor if isinstance(descriptor, type) else self._aliases.get(descriptor)
        if cls is None or cls not in self._decoders:
            raise UnregisteredTypeError(f"No decoder registered for {descriptor!r}")
        return self._decoders[cls]

    def __contains__(self, descriptor: object) -> bool:
        if isinstance(descriptor, type):
            return descriptor in self._decoders
        return descriptor in self._aliases

    @staticmethod
    def _default_decoder(cls: type) -> Decoder:
        if hasattr(cls, "model_validate"):
            return cls.model_validate
        return lambda fields: cls(**fields)

default_registry = DecoderRegistry()
default_registry.register(Rectangle)

class JsonCodec:
    """JSON text encoding plus registry-driven decoding."""

    def __init__(self, registry: Optional[DecoderRegistry] = None, sort_keys: bool = False):
        self.registry = registry or default_registry
        self.sort_keys = sort_keys

    def serialize(self, value: Any) -> str:
        """
        Encode ``value`` as compact JSON text.

        Pydantic models are dumped to their fields first; derived
        properties such as ``Rectangle.area`` are not included. Floats
        keep their Python form (``10.0`` stays ``10.0``).

        Raises:
            ValueError: If ``value`` holds NaN or infinity, or a type
                pydantic cannot convert to JSON
        """
        return json.dumps(
            to_jsonable_python(value),
            separators=(",", ":"),
            sort_keys=self.sort_keys,
            ensure_ascii=False,
            allow_nan=False
        )

    def deserialize(self, descriptor: Descriptor, text: str) -> Any:
        """
        Decode JSON ``text`` into an instance of the type ``descriptor``
        names.

        Raises:
            UnregisteredTypeError: If ``descriptor`` has no decoder
            ParseError: If the text is not a JSON object or the decoder
                rejects its fields
        """
        decoder = self.registry.decoder_for(descriptor)
        try:
            fields = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug(f"Invalid JSON for {descriptor!r}: {str(e)}")
            raise ParseError(f"Invalid JSON string: {str(e)}") from e

        if not isinstance(fields, dict):
            raise ParseError(f"Expected a JSON object, got {type(fields).__name__}")

        try:
            return decoder(fields)
        except Exception as e:
            logger.debug(f"Decoder for {descriptor!r} rejected fields: {str(e)}")
            raise ParseError(f"Invalid data for {descriptor!r}: {str(e)}") from e

    def load(self, descriptor: Descriptor, file_path: Union[str, Path]) -> Any:
        """Decode the JSON file at ``file_path``."""
        return self.deserialize(descriptor, load_json_text(file_path))

default_codec = JsonCodec()

def serialize(value: Any) -> str:
    return default_codec.serialize(value)

def deserialize(descriptor: Descriptor, text: str) -> Any:
    return default_codec.deserialize(descriptor, text)

def load(descriptor: Descriptor, file_path: Union[str, Path]) -> Any:
    return default_codec.load(descriptor, file_path)
