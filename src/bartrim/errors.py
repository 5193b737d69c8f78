class BarcodeError(Exception):
    """Base class of errors raised while encoding a barcode."""


class UnsupportedCharacter(BarcodeError, ValueError):
    """Character can't be represented in the Code128 B alphabet."""
    def __init__(self, index, code_point):
        self.index = index
        self.code_point = code_point
        super().__init__(
            "Character at index {} (U+{:04X}) not supported "
            "by Code128 B".format(index, code_point)
        )


class PatternNotFound(BarcodeError, LookupError):
    """Symbol code has no stripe pattern. Signals a bug in the encoder."""
    def __init__(self, code):
        self.code = code
        super().__init__("Pattern not found for code {!r}".format(code))
