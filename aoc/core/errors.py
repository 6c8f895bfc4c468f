class UnknownDirectionError(ValueError):
    """Raised when a value cannot be interpreted as one of the 8 directions."""

    def __init__(self, direction=None, target=None):
        if target is not None:
            message = f"Unknown direction towards {target} from {direction}"
        else:
            message = f"Unknown direction {direction}"
        super().__init__(message)
        self.direction = direction
        self.target = target


class PairParseError(ValueError):
    """Raised when a string does not split into two parts."""

    def __init__(self, text: str, separator: str):
        super().__init__(f"String {text!r} did not have two elements when split with {separator!r}")
        self.text = text
        self.separator = separator
