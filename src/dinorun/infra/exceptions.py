class PreferencesSaveError(Exception):
    """Raised when the preference file cannot be written."""
