"""Long-shadow construction engine."""

from longshadow.engine.shadow import ShadowBuilder, ShadowState

__all__ = ["ShadowBuilder", "ShadowState"]
