"""Foundation: errors, Result type and settings shared by every toolxml module."""
