from abc import ABC, abstractmethod


class BarcodeEncoding(ABC):
    """Linear barcode base class

    Encodings produce module sequences: widths of alternating
    bars and spaces, starting with a bar.
    """
    @classmethod
    def widths(cls, pattern):
        """Split pattern string into integer module widths

        :param str pattern:     Digits, each one bar or space width
        :return:                Yields module widths"""
        for digit in pattern:
            yield int(digit)

    @abstractmethod
    def modules(self, data):
        raise NotImplementedError
