from typing import TYPE_CHECKING, Any, Self, overload

from pydantic import Field

from tessera.domain.collection.model.ordering import EntryPositions
from tessera.domain.collection.model.value import (
    SORT_POLICIES,
    CollectionPolicy,
    DateBehavior,
    SortDirection,
)
from tessera.domain.shared.error import ValidationError
from tessera.domain.shared.model.aggregate import Aggregate

if TYPE_CHECKING:
    from tessera.domain.blueprint.model.value import Blueprint
    from tessera.domain.blueprint.port.repository import BlueprintRepository


DEFAULT_BLUEPRINT = "default"


class Collection(Aggregate):
    """Configuration for a group of entries.

    Setters are fluent and return the collection. Values that depend on
    process-wide settings (sites, revisions) are derived from ``policy``.
    """

    handle: str | None = None
    route: str | None = None
    template: str = "default"
    layout: str = "layout"
    configured_title: str | None = None
    configured_sites: list[str] = []
    cascade: dict[str, Any] = {}
    entry_blueprint_handles: list[str] = []
    dated: bool = False
    orderable: bool = False
    future_date_behavior: DateBehavior = DateBehavior.PUBLIC
    past_date_behavior: DateBehavior = DateBehavior.PUBLIC
    publish_state: bool = True
    revisions: bool = False
    entry_positions: EntryPositions = Field(default_factory=EntryPositions)
    policy: CollectionPolicy = Field(default_factory=CollectionPolicy, exclude=True)

    # -- identity & routing ---------------------------------------------------

    def set_handle(self, handle: str) -> Self:
        self.handle = handle
        return self

    def set_route(self, route: str | None) -> Self:
        self.route = route
        return self

    def set_template(self, template: str) -> Self:
        self.template = template
        return self

    def set_layout(self, layout: str) -> Self:
        self.layout = layout
        return self

    @property
    def title(self) -> str | None:
        if self.configured_title is not None:
            return self.configured_title
        if self.handle is None:
            return None
        return self.handle.replace("_", " ").replace("-", " ").title()

    def set_title(self, title: str | None) -> Self:
        self.configured_title = title
        return self

    # -- sites ----------------------------------------------------------------

    @property
    def sites(self) -> list[str]:
        if not self.policy.sites.is_multisite:
            return [self.policy.sites.default().handle]
        return list(self.configured_sites)

    def set_sites(self, sites: list[str]) -> Self:
        """Assign sites. Ignored by ``sites`` while only one site is configured."""
        self.configured_sites = sites
        return self

    # -- cascade --------------------------------------------------------------

    def set_cascade(self, cascade: dict[str, Any]) -> Self:
        self.cascade = cascade
        return self

    def cascade_value(self, key: str, default: Any = None) -> Any:
        return self.cascade.get(key, default)

    # -- blueprints -----------------------------------------------------------

    def set_entry_blueprints(self, handles: list[str]) -> Self:
        self.entry_blueprint_handles = handles
        return self

    def entry_blueprints(self, blueprints: "BlueprintRepository") -> list["Blueprint"]:
        found = (blueprints.find(handle) for handle in self.entry_blueprint_handles)
        return [blueprint for blueprint in found if blueprint is not None]

    def entry_blueprint(self, blueprints: "BlueprintRepository") -> "Blueprint | None":
        """The blueprint new entries use: the first assigned, else the default one."""
        if not self.entry_blueprint_handles:
            return blueprints.find(DEFAULT_BLUEPRINT)
        return next(iter(self.entry_blueprints(blueprints)), None)

    # -- sorting --------------------------------------------------------------

    def set_dated(self, dated: bool) -> Self:
        self.dated = dated
        return self

    def set_orderable(self, orderable: bool) -> Self:
        self.orderable = orderable
        return self

    @property
    def sort_field(self) -> str:
        return SORT_POLICIES[(self.dated, self.orderable)].field

    @property
    def sort_direction(self) -> SortDirection:
        return SORT_POLICIES[(self.dated, self.orderable)].direction

    # -- publishing -----------------------------------------------------------

    def set_future_date_behavior(self, behavior: str | None) -> Self:
        self.future_date_behavior = self._date_behavior(behavior, "future_date_behavior")
        return self

    def set_past_date_behavior(self, behavior: str | None) -> Self:
        self.past_date_behavior = self._date_behavior(behavior, "past_date_behavior")
        return self

    @staticmethod
    def _date_behavior(behavior: str | None, field: str) -> DateBehavior:
        if behavior is None:
            return DateBehavior.PUBLIC
        try:
            return DateBehavior(behavior)
        except ValueError:
            allowed = ", ".join(b.value for b in DateBehavior)
            raise ValidationError(
                f"Invalid {field} '{behavior}' (expected one of: {allowed})", field=field
            ) from None

    @property
    def revisions_enabled(self) -> bool:
        return self.policy.revisions_enabled and self.revisions

    def set_revisions_enabled(self, enabled: bool) -> Self:
        self.revisions = enabled
        return self

    @property
    def default_publish_state(self) -> bool:
        """Whether new entries start published. Always False under revisions."""
        if self.revisions_enabled:
            return False
        return self.publish_state

    def set_default_publish_state(self, published: bool) -> Self:
        self.publish_state = published
        return self

    # -- entry ordering -------------------------------------------------------

    def set_entry_positions(self, positions: dict[int, str]) -> Self:
        self.entry_positions = EntryPositions.from_mapping(positions)
        return self

    def get_entry_positions(self) -> dict[int, str]:
        return self.entry_positions.sorted_positions()

    def set_entry_position(self, entry: str, position: int) -> Self:
        self.entry_positions.set_position(entry, position)
        return self

    def get_entry_position(self, entry: str) -> int | None:
        return self.entry_positions.get_position(entry)

    @overload
    def get_entry_order(self) -> list[str]: ...

    @overload
    def get_entry_order(self, entry: str) -> int | None: ...

    def get_entry_order(self, entry: str | None = None) -> list[str] | int | None:
        """Entries in position order, or the 1-based rank of a single entry."""
        if entry is None:
            return self.entry_positions.order()
        return self.entry_positions.rank(entry)
