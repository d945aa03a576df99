"""Site registry value objects."""

from typing import TYPE_CHECKING

from tessera.domain.shared.error import ConfigurationError
from tessera.domain.shared.model.value import ValueObject

if TYPE_CHECKING:
    from tessera.config import SitesConfig


class Site(ValueObject):
    handle: str
    name: str
    url: str = "/"
    locale: str = "en_US"


class Sites(ValueObject):
    """Ordered set of configured sites; the first one is the default."""

    sites: tuple[Site, ...] = (Site(handle="en", name="English"),)

    def model_post_init(self, __context: object) -> None:
        if not self.sites:
            raise ConfigurationError("At least one site must be configured")

    @classmethod
    def from_config(cls, config: "SitesConfig") -> "Sites":
        return cls(
            sites=tuple(
                Site(
                    handle=handle,
                    name=site.name or handle.title(),
                    url=site.url,
                    locale=site.locale,
                )
                for handle, site in config.sites.items()
            )
        )

    @classmethod
    def single(cls, handle: str = "en") -> "Sites":
        return cls(sites=(Site(handle=handle, name=handle.title()),))

    def all(self) -> list[str]:
        return [site.handle for site in self.sites]

    def default(self) -> Site:
        return self.sites[0]

    def get(self, handle: str) -> Site | None:
        return next((site for site in self.sites if site.handle == handle), None)

    @property
    def is_multisite(self) -> bool:
        return len(self.sites) > 1
