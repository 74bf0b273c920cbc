class TransguardError(Exception):
    pass

class ConfigError(TransguardError):
    pass

class ReviewError(TransguardError):
    pass

class FragmentSourceError(ReviewError):
    """Input file of fragments could not be read."""
    pass
