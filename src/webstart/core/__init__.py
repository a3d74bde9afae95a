"""Data model, errors and settings shared across webstart."""
