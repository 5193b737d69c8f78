from .encoding import BarcodeEncoding
from ..errors import PatternNotFound, UnsupportedCharacter


class Code128B(BarcodeEncoding):
    """
    Encoder for Code128 barcode, B alphabet (printable ASCII).
    """
    # stripe patterns, each digit is width of a bar or space in modules,
    # bar first; 6 digits per code, 7 for the stop code
    pattern = (
        "212222", "222122", "222221", "121223", "121322", "131222",
        "122213", "122312", "132212", "221213", "221312", "231212",
        "112232", "122132", "122231", "113222", "123122", "123221",
        "223211", "221132", "221231", "213212", "223112", "312131",
        "311222", "321122", "321221", "312212", "322112", "322211",
        "212123", "212321", "232121", "111323", "131123", "131321",
        "112313", "132113", "132311", "211313", "231113", "231311",
        "112133", "112331", "132131", "113123", "113321", "133121",
        "313121", "211331", "231131", "213113", "213311", "213131",
        "311123", "311321", "331121", "312113", "312311", "332111",
        "314111", "221411", "431111", "111224", "111422", "121124",
        "121421", "141122", "141221", "112214", "112412", "122114",
        "122411", "142112", "142211", "241211", "221114", "413111",
        "241112", "134111", "111242", "121142", "121241", "114212",
        "124112", "124211", "411212", "421112", "421211", "212141",
        "214121", "412121", "111143", "111341", "131141", "114113",
        "114311", "411113", "411311", "113141", "114131", "311141",
        "411131", "211412", "211214", "211232", "2331112",
    )

    start_B = 104
    stop = 106

    # B alphabet covers code points 32..126
    first_char = 32
    last_char = 126

    @classmethod
    def validate(cls, s):
        """Check that every character belongs to the B alphabet

        :param str s:       Text to check
        :raises UnsupportedCharacter: on first character out of range"""
        for i, char in enumerate(s):
            code = ord(char)
            if not cls.first_char <= code <= cls.last_char:
                raise UnsupportedCharacter(i, code)

    @classmethod
    def _enc_B(cls, char):
        """Encode single character from B alphabet

        :param str char:    A character
        :return:            Character code integer"""
        return ord(char) - cls.first_char

    @classmethod
    def checksum(cls, values):
        """Modulo 103 checksum of character codes. Sum starts at the
        start code value, character at position i has weight i + 1

        :param values:      Character codes, start code excluded
        :return:            Checksum code in range 0..102"""
        total = cls.start_B
        for i, value in enumerate(values):
            total += value * (i + 1)
        return total % 103

    @classmethod
    def encode(cls, s):
        """Encode text into symbol codes: start, characters, checksum, stop

        :param str s:       Text in B alphabet
        :return:            List of integer codes"""
        cls.validate(s)
        values = [cls._enc_B(char) for char in s]
        return [cls.start_B] + values + [cls.checksum(values), cls.stop]

    @classmethod
    def expand(cls, codes):
        """Flatten symbol codes into module widths

        :param codes:       Iterable of integer codes
        :return:            List of module widths"""
        modules = []
        for code in codes:
            if not 0 <= code < len(cls.pattern):
                raise PatternNotFound(code)
            modules.extend(cls.widths(cls.pattern[code]))
        return modules

    @classmethod
    def modules(cls, s):
        """Encodes string into module widths, bar first.

    :param s:               data to encode
    :return:                List of bar and space widths in modules"""
        return cls.expand(cls.encode(s))


def encode_to_modules(text):
    return Code128B.modules(text)
