class CircleTreeError(Exception):
    pass


class ConfigurationError(CircleTreeError):
    pass


class TreeFormatError(CircleTreeError):
    pass
