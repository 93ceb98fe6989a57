"""
Deterministic material estimation engine.

Pure Python math. Given a DeckConfig, produce a MaterialList with
quantities and costs for boards, framing, footings, railing, stairs and
hardware. Recomputed in full on every call; nothing is cached.
"""

from .deck_estimator import DeckEstimator, estimate

__all__ = ["DeckEstimator", "estimate"]
