"""
fluidkit: fluid value resolution for design-token presets.

Compiles min/max token pairs into CSS clamp() formulas, previews unsaved
edits through an overlay stylesheet and resolves responsive inheritance
across a device hierarchy.
"""

__version__ = "0.1.0"
