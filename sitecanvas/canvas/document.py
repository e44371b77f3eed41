"""
Element Document
================

Ordered collection of elements composing one page. List order is paint
order: later elements are drawn in front of earlier ones.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from ..models.element_models import Element, Position
from ..elements.registry import new_element_id

logger = logging.getLogger(__name__)

DUPLICATE_OFFSET = 20


class DuplicateElementError(ValueError):
    """Raised when inserting an element whose id is already in the document."""


class Document:
    """
    Page document mutated only through insert, update and delete.

    Ids are unique within a document. Deleting an element never touches
    the others.
    """

    def __init__(self, elements: Optional[List[Element]] = None):
        self._elements: List[Element] = []
        for element in elements or []:
            self.insert(element)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements))

    def __contains__(self, element_id: object) -> bool:
        return self._index(element_id) is not None

    @property
    def elements(self) -> List[Element]:
        """Elements in paint order (a copy of the list)."""
        return list(self._elements)

    def ids(self) -> List[str]:
        return [e.id for e in self._elements]

    def _index(self, element_id: object) -> Optional[int]:
        for i, element in enumerate(self._elements):
            if element.id == element_id:
                return i
        return None

    def get(self, element_id: str) -> Optional[Element]:
        index = self._index(element_id)
        return self._elements[index] if index is not None else None

    def insert(self, element: Element) -> Element:
        """Append an element on top of the paint order."""
        if self._index(element.id) is not None:
            raise DuplicateElementError(f"Element id already in document: {element.id}")
        self._elements.append(element)
        return element

    def update(self, element_id: str, changes: Dict[str, Any]) -> Optional[Element]:
        """
        Shallow-merge changes into one element.

        Only the given fields are replaced; nested values such as styles are
        overwritten as a whole. Returns the updated element, or None if the
        id is unknown.
        """
        index = self._index(element_id)
        if index is None:
            logger.debug(f"[DOCUMENT] Update for unknown element {element_id}")
            return None

        current = self._elements[index]
        merged = current.model_dump()
        merged.update({k: v for k, v in changes.items() if k != "id"})
        updated = Element.model_validate(merged)
        self._elements[index] = updated
        return updated

    def delete(self, element_id: str) -> bool:
        """Remove one element; returns False if the id is unknown."""
        index = self._index(element_id)
        if index is None:
            return False
        del self._elements[index]
        return True

    def duplicate(self, element_id: str) -> Optional[Element]:
        """Append a copy of an element with a fresh id, offset down and right."""
        source = self.get(element_id)
        if source is None:
            return None
        copy = source.model_copy(deep=True, update={
            "id": new_element_id(source.type),
            "position": Position(
                x=source.position.x + DUPLICATE_OFFSET,
                y=source.position.y + DUPLICATE_OFFSET
            ),
        })
        return self.insert(copy)

    def clear(self) -> None:
        self._elements = []

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._elements]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> "Document":
        return cls([Element.model_validate(item) for item in data])
