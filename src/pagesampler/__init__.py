"""pagesampler - repeated PageSpeed Insights sampling with min/max/avg reports."""

__version__ = "0.3.0"
