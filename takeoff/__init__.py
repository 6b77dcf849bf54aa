"""Blueprint takeoff engine.

Turns a text-generation service's blueprint analysis into priced,
quantity-verified takeoff results for a single construction trade.
"""

__version__ = "1.0.0"
