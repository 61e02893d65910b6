"""Optional-value wrapper and composable field-validation toolkit."""

__version__ = "0.1.0"
