"""ShadowBuilder: long shadow for one icon, cut to its base.

Lifecycle:
    UNINITIALIZED --calculate_shadow--> TEMPLATE_READY --apply_shadow--> APPLIED
    APPLIED --apply_shadow / scale / set_intensity--> APPLIED
    any --remove--> DISPOSED

The template outline is never drawn. It is the uncut shadow, swept far past
the icon and with its far edge pushed out to a practically infinite distance,
so it can be rescaled and re-cut as often as needed. The applied outline is
the visible part: template ∩ base region, directly below the icon.
"""

from __future__ import annotations

import enum
import logging
import math

from longshadow.base import BaseSurface
from longshadow.engine.cleanup import extend_tail, remove_duplicate_vertices, simplify_staircase
from longshadow.engine.constants import (
    GRADIENT_END_OFFSET,
    GRADIENT_START_OFFSET,
    SHADOW_ITERATIONS,
    SHADOW_LENGTH_FACTOR,
)
from longshadow.errors import ShadowStateError
from longshadow.shapes.outline import CompoundOutline, Outline, Shape
from longshadow.shapes.style import Color, GradientStop, LinearGradient

logger = logging.getLogger(__name__)


class ShadowState(enum.IntEnum):
    UNINITIALIZED = 0
    TEMPLATE_READY = 1
    APPLIED = 2
    DISPOSED = 3


def icon_diagonal(icon: Shape) -> float:
    """Diagonal of the square spanned by the icon's larger side."""
    bounds = icon.bounds
    return math.sqrt(2) * max(bounds.width, bounds.height)


def sweep_step(diagonal: float) -> float:
    """Per-iteration offset along each axis."""
    return diagonal * SHADOW_LENGTH_FACTOR / SHADOW_ITERATIONS


def sweep(icon: Shape, step: float, iterations: int = SHADOW_ITERATIONS) -> CompoundOutline:
    """Union of the icon with `iterations` copies, each shifted one more (step, step).

    Every superseded accumulator is removed as soon as the next one exists.
    """
    accumulated: Shape = icon.clone()
    cursor = icon.clone()
    for _ in range(iterations):
        cursor.translate(step, step)
        united = accumulated.unite(cursor)
        accumulated.remove()
        accumulated = united
    cursor.remove()

    if isinstance(accumulated, CompoundOutline):
        return accumulated
    # iterations == 0: nothing was united, wrap the clone
    result = CompoundOutline(accumulated.geometry)
    accumulated.remove()
    return result


class ShadowBuilder:
    """Builds, cuts, styles and scales the long shadow of one icon.

    :param icon: the icon outline; read and cloned, never modified
    :param base: surface providing the region the shadow may fall on
    """

    def __init__(self, icon: Shape, base: BaseSurface) -> None:
        self.icon = icon
        self.base = base
        self.template_outline: Outline | None = None
        self.applied_outline: CompoundOutline | None = None
        self.start_intensity: float | None = None
        self.end_intensity: float | None = None
        self.state = ShadowState.UNINITIALIZED

    def _require(self, *states: ShadowState, action: str) -> None:
        if self.state not in states:
            allowed = ", ".join(s.name for s in states)
            raise ShadowStateError(f"Cannot {action} in state {self.state.name} (needs {allowed})")

    # --- construction ---

    def calculate_shadow(self) -> Outline:
        """Build the template outline. Does not (!) apply it."""
        self._require(ShadowState.UNINITIALIZED, action="calculate shadow")

        diagonal = icon_diagonal(self.icon)
        step = sweep_step(diagonal)
        if self.icon.is_empty:
            logger.warning("Icon outline is degenerate, shadow will be empty")

        swept = sweep(self.icon, step)
        try:
            template = Outline.from_path_data(swept.path_data)
        finally:
            swept.remove()
        n_raw = len(template)

        n_duplicates = remove_duplicate_vertices(template)
        n_staircase = simplify_staircase(template, step)
        n_far = extend_tail(template, diagonal)
        logger.debug(
            "Shadow outline: %d raw vertices, -%d duplicates, -%d staircase, %d extended",
            n_raw,
            n_duplicates,
            n_staircase,
            n_far,
        )

        self.template_outline = template
        self.state = ShadowState.TEMPLATE_READY
        logger.info("Calculated shadow template with %d vertices (step %.4g)", len(template), step)
        return template

    # --- placement ---

    def apply_shadow(self) -> CompoundOutline:
        """Cut the template to the base and place the result directly below the icon.

        The new outline takes the old one's slot before the old one is removed,
        so the scene never lacks a shadow. It is registered with the base as this
        builder's shadow: later shadows of other icons are cut around it, and
        this builder's own re-applies ignore it.
        """
        self._require(ShadowState.TEMPLATE_READY, ShadowState.APPLIED, action="apply shadow")
        if self.icon.scene is None:
            raise ShadowStateError("Icon outline is not part of a scene")

        region = self.base.get_region_without_shadows(exclude_owner=self)
        applied = self.template_outline.intersect(region)
        region.remove()

        previous = self.applied_outline
        if previous is not None and previous.scene is not None:
            previous.replace_with(applied)
        applied.insert_below(self.icon)
        self.base.add_shadow_region(applied, owner=self)
        if previous is not None:
            previous.remove()

        self.applied_outline = applied
        self.state = ShadowState.APPLIED

        if self.start_intensity is not None and self.end_intensity is not None:
            self.set_intensity(self.start_intensity, self.end_intensity)
        return applied

    def set_intensity(self, start_intensity: float, end_intensity: float) -> LinearGradient:
        """Paint the shadow black, fading from start to end intensity.

        :param start_intensity: opacity near the icon, in [0, 1]
        :param end_intensity: opacity at the far base edge, in [0, 1]
        :raises pydantic.ValidationError: an intensity lies outside [0, 1]
        """
        self._require(ShadowState.APPLIED, action="set intensity")
        region = self.base.get_region_without_shadows(exclude_owner=self)
        bounds = region.bounds
        region.remove()

        gradient = LinearGradient.between(
            bounds.top_left,
            bounds.bottom_right,
            stops=[
                GradientStop(color=Color(alpha=start_intensity), offset=GRADIENT_START_OFFSET),
                GradientStop(color=Color(alpha=end_intensity), offset=GRADIENT_END_OFFSET),
            ],
        )
        self.start_intensity = start_intensity
        self.end_intensity = end_intensity
        self.applied_outline.fill = gradient

        if self.applied_outline.scene is not None:
            self.applied_outline.scene.draw()
        return gradient

    def scale(self, factor: float) -> CompoundOutline:
        """Scale the template about the icon's position and re-cut it."""
        self._require(ShadowState.APPLIED, action="scale shadow")
        self.template_outline.scale(factor, self.icon.position)
        return self.apply_shadow()

    # --- teardown ---

    def remove(self) -> None:
        """Dispose template and applied outline. Safe to call repeatedly."""
        if self.template_outline is not None:
            self.template_outline.remove()
            self.template_outline = None
        if self.applied_outline is not None:
            self.base.discard_shadow_region(self)
            self.applied_outline.remove()
            self.applied_outline = None
        self.state = ShadowState.DISPOSED
