"""namematch: "did you mean" suggestions for mistyped names."""

__version__ = "0.1.0"
