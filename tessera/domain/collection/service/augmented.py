from tessera.domain.augmentation.service.augmented import AbstractAugmented, computed
from tessera.domain.collection.model.aggregate import Collection


class AugmentedCollection(AbstractAugmented[Collection]):
    """Exposes a collection's configuration to templates."""

    def keys(self) -> list[str]:
        return [
            "handle",
            "title",
            "route",
            "template",
            "layout",
            "sites",
            "sort_field",
            "sort_direction",
        ]

    @computed
    def handle(self) -> str | None:
        return self.data.handle

    @computed
    def title(self) -> str | None:
        return self.data.title

    @computed
    def route(self) -> str | None:
        return self.data.route

    @computed
    def template(self) -> str:
        return self.data.template

    @computed
    def layout(self) -> str:
        return self.data.layout

    @computed
    def sites(self) -> list[str]:
        return self.data.sites

    @computed
    def sort_field(self) -> str:
        return self.data.sort_field

    @computed
    def sort_direction(self) -> str:
        return self.data.sort_direction.value
