from enum import Enum
from typing import Dict, FrozenSet, Optional, Sequence, Tuple, Union
from dataclasses import dataclass
import logging

from .exceptions import (
    DuplicateSelectorPart,
    OutOfOrderSelectorPart,
    UnknownSelectorCategory
)
from .utils import get_part_specificity

logger = logging.getLogger(__name__)

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

class SelectorCategory(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

# Higher rank must come first.
CATEGORY_RANKS: Dict[SelectorCategory, int] = {
    SelectorCategory.ELEMENT: 10,
    SelectorCategory.ID: 8,
    SelectorCategory.CLASS: 6,
    SelectorCategory.ATTRIBUTE: 4,
    SelectorCategory.PSEUDO_CLASS: 2,
    SelectorCategory.PSEUDO_ELEMENT: 1,
}
COMBINED_RANK = 0

CATEGORY_TEMPLATES: Dict[SelectorCategory, str] = {
    SelectorCategory.ELEMENT: "{}",
    SelectorCategory.ID: "#{}",
    SelectorCategory.CLASS: ".{}",
    SelectorCategory.ATTRIBUTE: "[{}]",
    SelectorCategory.PSEUDO_CLASS: ":{}",
    SelectorCategory.PSEUDO_ELEMENT: "::{}",
}

SINGLETON_CATEGORIES: FrozenSet[SelectorCategory] = frozenset({
    SelectorCategory.ELEMENT,
    SelectorCategory.ID,
    SelectorCategory.PSEUDO_ELEMENT,
})

# (id_count, class_count, element_count), used when cssselect cannot parse a part
CATEGORY_SPECIFICITY: Dict[SelectorCategory, Tuple[int, int, int]] = {
    SelectorCategory.ELEMENT: (0, 0, 1),
    SelectorCategory.ID: (1, 0, 0),
    SelectorCategory.CLASS: (0, 1, 0),
    SelectorCategory.ATTRIBUTE: (0, 1, 0),
    SelectorCategory.PSEUDO_CLASS: (0, 1, 0),
    SelectorCategory.PSEUDO_ELEMENT: (0, 0, 1),
}

@dataclass(frozen=True)
class SelectorPart:
    """One rendered token of a selector.

    ``category`` is None for the opaque text produced by combining two
    selectors.
    """
    text: str
    category: Optional[SelectorCategory] = None
    specificity: Tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def render(cls, category: SelectorCategory, value: str) -> "SelectorPart":
        text = CATEGORY_TEMPLATES[category].format(value)
        return cls(
            text=text,
            category=category,
            specificity=get_part_specificity(text, CATEGORY_SPECIFICITY[category])
        )

    @property
    def rank(self) -> int:
        if self.category is None:
            return COMBINED_RANK
        return CATEGORY_RANKS[self.category]

    @property
    def is_combined(self) -> bool:
        return self.category is None

def resolve_category(category: Union[SelectorCategory, str]) -> SelectorCategory:
    """
    Map a category given as an enum member, its value ("pseudo-class")
    or its name in any case ("pseudo_class", "PSEUDO_CLASS").

    Raises:
        UnknownSelectorCategory: If the name matches no category
    """
    if isinstance(category, SelectorCategory):
        return category
    if not isinstance(category, str):
        raise UnknownSelectorCategory(f"Invalid selector category: {category!r}")
    try:
        return SelectorCategory(category)
    except ValueError:
        pass
    try:
        return SelectorCategory[category.strip().upper().replace("-", "_")]
    except KeyError:
        raise UnknownSelectorCategory(f"Unknown selector category: {category!r}") from None

class SelectorValidator:
    """Ordering and uniqueness rules for compound selector parts."""

    def check_append(
        self,
        parts: Sequence[SelectorPart],
        category: SelectorCategory
    ) -> None:
        """
        Check that ``category`` may be appended after ``parts``.

        Uniqueness is checked before order, so a part breaking both rules
        raises DuplicateSelectorPart.

        Args:
            parts: Parts already in the selector, in emission order
            category: Category of the part about to be appended

        Raises:
            DuplicateSelectorPart: If a singleton category would occur twice
            OutOfOrderSelectorPart: If the new rank exceeds the previous one
        """
        if category in SINGLETON_CATEGORIES:
            count = sum(1 for part in parts if part.category is category) + 1
            if count > 1:
                logger.debug(f"Rejected second {category.value} part")
                raise DuplicateSelectorPart(DUPLICATE_PART_MESSAGE)

        if parts and CATEGORY_RANKS[category] > parts[-1].rank:
            logger.debug(
                f"Rejected {category.value} part after rank {parts[-1].rank}"
            )
            raise OutOfOrderSelectorPart(PART_ORDER_MESSAGE)

