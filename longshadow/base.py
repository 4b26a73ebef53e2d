"""Icon base: the surface shadows are cut to."""

from __future__ import annotations

import logging
from typing import Protocol

from longshadow.shapes.outline import CompoundOutline, Shape

logger = logging.getLogger(__name__)


class BaseSurface(Protocol):
    """Anything that can tell a shadow where it is allowed to fall.

    Shadows are registered per owner, so an owner's own shadow never blocks
    its replacement.
    """

    def get_region_without_shadows(self, exclude_owner: object | None = None) -> Shape:
        """Return a new shape owned by the caller.

        :param exclude_owner: the requester; its own registered shadow is not cut out
        """
        ...

    def add_shadow_region(self, region: Shape, owner: object | None = None) -> None: ...

    def discard_shadow_region(self, owner: object) -> None: ...


class IconBase:
    """A base outline with the shadows of other icons cut out of it.

    Excluding registered shadow regions keeps one icon's shadow from being
    painted on top of another's. Each owner holds at most one region;
    registering again replaces it.
    """

    def __init__(self, outline: Shape) -> None:
        self.outline = outline
        self._shadow_regions: list[tuple[object, Shape]] = []

    @property
    def shadow_regions(self) -> list[Shape]:
        return [region for _, region in self._shadow_regions]

    def add_shadow_region(self, region: Shape, owner: object | None = None) -> None:
        """Register region as owner's shadow. Without an owner the region owns itself."""
        owner = region if owner is None else owner
        self._shadow_regions = [(o, r) for o, r in self._shadow_regions if o is not owner]
        self._shadow_regions.append((owner, region))

    def discard_shadow_region(self, owner: object) -> None:
        self._shadow_regions = [(o, r) for o, r in self._shadow_regions if o is not owner]

    def get_region_without_shadows(self, exclude_owner: object | None = None) -> CompoundOutline:
        region = CompoundOutline(self.outline.geometry)
        # Regions removed elsewhere are forgotten rather than resurrected
        self._shadow_regions = [(o, r) for o, r in self._shadow_regions if not r.disposed]
        others = [r for o, r in self._shadow_regions if exclude_owner is None or o is not exclude_owner]
        for shadow in others:
            remaining = region.subtract(shadow)
            region.remove()
            region = remaining
        logger.debug("Base region excludes %d shadow regions", len(others))
        return region
