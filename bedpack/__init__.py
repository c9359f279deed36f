"""bedpack: place rectangular parts on a build bed without overlap.

Subpackages:
  geometry   Point/Box primitives and the convex-hull engine.
  bed        Bed model, outline setup, spiral placement engine,
             descriptor parsing, loading and validation.
"""

__version__ = "0.1.0"
