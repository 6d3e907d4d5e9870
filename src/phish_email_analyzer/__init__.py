"""Rule-based phishing email scoring and collection statistics."""

__version__ = "0.1.0"
