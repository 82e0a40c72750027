"""Geology and mineralogy toolkit: crystallography, dating, formulas, geochemistry, geothermal and glacier models."""

__version__ = "1.1.0"