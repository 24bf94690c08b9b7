import pytest
from css_selector_builder import CssSelectorBuilder, DecoderRegistry, JsonCodec, Rectangle

@pytest.fixture
def builder():
    """Return a fresh selector builder facade."""
    return CssSelectorBuilder()

@pytest.fixture
def codec():
    """Return a codec with its own registry, so tests can register freely."""
    registry = DecoderRegistry()
    registry.register(Rectangle)
    return JsonCodec(registry=registry)
