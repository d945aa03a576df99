from enum import StrEnum
from typing import TYPE_CHECKING

from tessera.domain.shared.model.value import ValueObject
from tessera.domain.site.model.value import Sites

if TYPE_CHECKING:
    from tessera.config import Config


class DateBehavior(StrEnum):
    """Visibility of entries dated in the future or past."""

    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortPolicy(ValueObject):
    field: str
    direction: SortDirection


# Keyed by (dated, orderable). Orderable always wins over dated.
SORT_POLICIES: dict[tuple[bool, bool], SortPolicy] = {
    (False, False): SortPolicy(field="title", direction=SortDirection.ASC),
    (True, False): SortPolicy(field="date", direction=SortDirection.DESC),
    (False, True): SortPolicy(field="order", direction=SortDirection.ASC),
    (True, True): SortPolicy(field="order", direction=SortDirection.ASC),
}


class CollectionPolicy(ValueObject):
    """Process-wide settings a collection consults.

    Passed in explicitly so a collection's behavior depends only on its own
    state and this policy.
    """

    sites: Sites = Sites.single()
    revisions_enabled: bool = False

    @classmethod
    def from_config(cls, config: "Config") -> "CollectionPolicy":
        return cls(
            sites=Sites.from_config(config.sites),
            revisions_enabled=config.revisions.enabled,
        )
