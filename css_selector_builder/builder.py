from enum import Enum
from typing import Optional, Sequence, Tuple, Union
import logging

from .validators import (
    SelectorCategory,
    SelectorPart,
    SelectorValidator,
    resolve_category
)
from .utils import add_specificity, format_combination, get_selector_specificity

logger = logging.getLogger(__name__)

class Combinator(Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

CombinatorLike = Union[Combinator, str]

class SelectorBuilder:
    """
    Immutable compound selector under construction.

    Every append returns a new builder, so a rejected part leaves the
    builder it was appended to unchanged:

        >>> SelectorBuilder().element("a").attr('href$=".png"').stringify()
        'a[href$=".png"]'
    """

    def __init__(
        self,
        parts: Sequence[SelectorPart] = (),
        validator: Optional[SelectorValidator] = None
    ):
        self._parts: Tuple[SelectorPart, ...] = tuple(parts)
        self.validator = validator or SelectorValidator()

    @property
    def parts(self) -> Tuple[SelectorPart, ...]:
        return self._parts

    @property
    def categories(self) -> Tuple[SelectorCategory, ...]:
        return tuple(part.category for part in self._parts if not part.is_combined)

    def append(self, category: Union[SelectorCategory, str], value: str) -> "SelectorBuilder":
        """
        Return a new builder with a part of ``category`` appended.

        Raises:
            UnknownSelectorCategory: If ``category`` names no category
            DuplicateSelectorPart: If element, id or pseudo-element repeats
            OutOfOrderSelectorPart: If the part breaks the category order
        """
        category = resolve_category(category)
        self.validator.check_append(self._parts, category)
        return self._with(SelectorPart.render(category, value))

    def element(self, value: str) -> "SelectorBuilder":
        return self.append(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self.append(SelectorCategory.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self.append(SelectorCategory.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        return self.append(SelectorCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self.append(SelectorCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self.append(SelectorCategory.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: "SelectorBuilder",
        combinator: CombinatorLike,
        right: "SelectorBuilder"
    ) -> "SelectorBuilder":
        """
        Return a new builder with ``left combinator right`` appended as one
        opaque part. Neither side is validated again.

        The combined part ranks below every category, so fragment methods
        called on the result raise OutOfOrderSelectorPart.
        """
        if isinstance(combinator, Combinator):
            combinator = combinator.value
        part = SelectorPart(
            text=format_combination(left.stringify(), combinator, right.stringify()),
            specificity=add_specificity(left.specificity(), right.specificity())
        )
        logger.debug(f"Combined selectors with {combinator!r}")
        return self._with(part)

    def stringify(self) -> str:
        return "".join(part.text for part in self._parts)

    def specificity(self) -> Tuple[int, int, int]:
        """(id_count, class_count, element_count) of the built selector."""
        return get_selector_specificity(self._parts)

    def _with(self, part: SelectorPart) -> "SelectorBuilder":
        return SelectorBuilder(self._parts + (part,), validator=self.validator)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorBuilder):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

class CssSelectorBuilder:
    """Stateless facade: every call starts from a fresh empty builder."""

    def __init__(self, validator: Optional[SelectorValidator] = None):
        self.validator = validator or SelectorValidator()

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(validator=self.validator)

    def append(self, category: Union[SelectorCategory, str], value: str) -> SelectorBuilder:
        return self._new().append(category, value)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: CombinatorLike,
        right: SelectorBuilder
    ) -> SelectorBuilder:
        return self._new().combine(left, combinator, right)

    def stringify(self) -> str:
        return self._new().stringify()

css_selector_builder = CssSelectorBuilder()
