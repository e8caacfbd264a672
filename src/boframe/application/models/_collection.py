"""Shared behavior of collection models."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Self

from boframe.application.models._base import (
    ModelBase,
    build_response,
    derive_model_class,
    require_parent,
)
from boframe.application.models.definition import build_collection_definition
from boframe.domain.model.enums import RemoteAction

if TYPE_CHECKING:
    from collections.abc import Iterator

    from boframe.application.models._object import ObjectModel
    from boframe.application.rules._base import Rule
    from boframe.domain.model.broken_rules_output import BrokenRulesOutput
    from boframe.domain.model.broken_rules_response import BrokenRulesResponse
    from boframe.domain.model.configuration import Configuration

logger = logging.getLogger(__name__)


class CollectionModel(ModelBase):
    """Ordered list of child objects of one item type."""

    def __init__(self, parent: ModelBase | None = None) -> None:
        """Initialize empty."""
        super().__init__(parent)
        self._items: list[Any] = []

    @classmethod
    def define(
        cls,
        name: str,
        item_type: type[ObjectModel],
        *,
        rules: Iterable[Rule] = (),
        config: Configuration | None = None,
    ) -> type[Self]:
        """Define a collection of this kind.

        Args:
            name: Model name, optionally "Name:uri" to set the repository address.
            item_type: Defined child object class of the items.
            rules: Authorization rules.
            config: Configuration. None = defaults.

        Raises:
            InvalidChildTypeError: Item type is not the matching child object kind.
            ModelDefinitionError: Validation rule given.
        """
        definition = build_collection_definition(cls.model_type, name, item_type, rules, config)
        return derive_model_class(cls, definition)

    @property
    def item_type(self) -> type[Any]:
        """Get model class of the items."""
        return self._definition.item_type  # type: ignore[return-value]

    @property
    def _item_parent(self) -> ModelBase:
        """Get the parent handed to new items."""
        return self._parent if self._parent is not None else self

    # =========================================================================
    # Items
    # =========================================================================

    def at(self, index: int) -> Any:
        """Get the item at a position.

        Raises:
            IndexError: Position out of range.
        """
        return self._items[index]

    def __getitem__(self, index: int) -> Any:
        """Get the item at a position."""
        return self._items[index]

    def __len__(self) -> int:
        """Get number of items, removed ones included until the next save."""
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate items in order."""
        return iter(list(self._items))

    def _is_live(self, item: Any) -> bool:
        """Check if an item takes part in validation and data transfer."""
        return True

    def _live_items(self) -> list[Any]:
        """Get items that take part in validation and data transfer."""
        return [item for item in self._items if self._is_live(item)]

    def _children(self) -> list[Any]:
        """Get the items."""
        return list(self._items)

    # =========================================================================
    # Validation and broken rules
    # =========================================================================

    def check_rules(self) -> None:
        """Validate every live item."""
        self._broken_rules.clear()
        for item in self._live_items():
            item.check_rules()
        self._is_validated = True

    def is_valid(self) -> bool:
        """Check own records and every live item."""
        if not self._is_validated:
            self.check_rules()
        return self._broken_rules.is_valid() and all(item.is_valid() for item in self._live_items())

    def _item_outputs(self, namespace: str | None) -> list[BrokenRulesOutput]:
        """Collect non-empty trees of live items, indexed by position."""
        outputs = []
        for index, item in enumerate(self._items):
            if not self._is_live(item):
                continue
            output = item._collect_broken_rules(namespace, index)
            if output:
                outputs.append(output)
        return outputs

    def _attach_broken_rules(
        self,
        output: BrokenRulesOutput,
        name: str,
        namespace: str | None,
    ) -> None:
        """Add item trees as a collection entry when any is not empty."""
        outputs = self._item_outputs(namespace)
        if outputs:
            output.add_children(name, outputs)

    # =========================================================================
    # Data transfer
    # =========================================================================

    def to_dto(self) -> list[Any]:
        """Build the list of live item DTOs."""
        return [item.to_dto() for item in self._live_items()]

    def from_dto(self, dto: Sequence[Any]) -> None:
        """Load values into live items, paired by position.

        Raises:
            TypeError: DTO is not a list.
        """
        if not isinstance(dto, list):
            raise TypeError(f"{self.model_name}: DTO must be a list, got {type(dto).__name__}")
        for item, data in zip(self._live_items(), dto, strict=False):
            item.from_dto(data)
        self._is_validated = False

    async def _load(self, data: Sequence[Any] | None) -> None:
        """Replace the items with ones loaded from the parent's data. None = nothing to load.

        Raises:
            TypeError: Data is not a list.
        """
        if data is None:
            return
        if not isinstance(data, list):
            raise TypeError(f"{self.model_name}: data must be a list, got {type(data).__name__}")
        parent = self._item_parent
        items = await asyncio.gather(*(self.item_type.load(parent, entry) for entry in data))
        self._items = list(items)
        self._is_validated = False
        logger.debug("%s: loaded %d items", self.model_name, len(self._items))

    async def _fetch_items(self, criteria: Any, method: str | None) -> bool:
        """Fetch the items of a root collection.

        Returns:
            False when the fetch was denied.

        Raises:
            PortalNotConfiguredError: No portal configured.
            RemoteActionError: Remote call or loading failed.
        """
        if not self._can_fetch(method):
            return False
        portal = self._require_portal()
        try:
            data = await self._invoke(portal, RemoteAction.FETCH, criteria, method)
            await self._load(data)
        except Exception as exc:
            raise self._wrap_error(RemoteAction.FETCH, exc) from exc
        return True


class ChildCollectionMixin:
    """Factories and broken rules of collections owned by an object."""

    @classmethod
    def empty(cls, parent: ModelBase) -> Self:
        """Build an empty collection owned by a parent."""
        return cls(require_parent(cls.__name__, parent))  # type: ignore[call-arg]

    def get_broken_rules(self, namespace: str | None = None) -> list[BrokenRulesOutput] | None:
        """Collect trees of the items that have broken rules. None when none has."""
        outputs = self._item_outputs(namespace)  # type: ignore[attr-defined]
        return outputs or None


class RootCollectionMixin:
    """Broken rules and response of standalone collections.

    Items are keyed by their zero-padded position next to the collection's
    own records.
    """

    def get_broken_rules(self, namespace: str | None = None) -> BrokenRulesOutput | None:
        """Collect own records and item trees. None when nothing is broken."""
        collection: Any = self
        output = collection._broken_rules.output(namespace)
        for item_output in collection._item_outputs(namespace):
            output.add_item(item_output.index, item_output)
        return output if output else None

    def get_response(
        self,
        message: str | None = None,
        namespace: str | None = None,
    ) -> BrokenRulesResponse | None:
        """Wrap the broken rules into a client response. None when nothing is broken."""
        output = self.get_broken_rules(namespace)
        return build_response(self, output, message)  # type: ignore[arg-type]
