class ContainerParseError(Exception):
    """Raised when an input file cannot be decomposed into body and attachments."""
