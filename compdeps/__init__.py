"""compdeps - component and include dependency analysis for native source trees."""

__version__ = "0.1.0"
