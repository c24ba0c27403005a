"""Urban air-pollution tracking, prediction, alerting and reporting."""

__version__ = "0.1.0"
__all__ = ["__version__"]