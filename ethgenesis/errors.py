class GenesisError(Exception):
    """Base class for errors raised by ethgenesis."""


class GenesisSerializationError(GenesisError):
    """A genesis document could not be encoded as JSON."""


class GenesisFormatError(GenesisError):
    """A genesis file does not have the expected shape."""
