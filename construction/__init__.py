# -----------------------------------------------------------------------------
# HOUSE CONSTRUCTION COMPANY
# -----------------------------------------------------------------------------
# Every house follows the same five-step construction template:
# Foundation -> Walls -> Roof -> Paint -> Final Touches.
# Only the materials and finishes change between house kinds.
# -----------------------------------------------------------------------------

__all__ = ["__version__"]

__version__ = "1.0.0"
