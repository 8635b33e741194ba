"""Settings, interpolators, key binding, input filtering, icon lookup and save records for a radial item wheel."""

__version__ = "1.0.0"