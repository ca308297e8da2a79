from .extractor import FormValues, as_values

__all__ = ["FormValues", "as_values"]
