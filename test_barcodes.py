from xml.etree import ElementTree

import pytest

from bartrim import (
    Code128B,
    PatternNotFound,
    RenderOptions,
    SvgBarcodeImage,
    UnsupportedCharacter,
    encode_to_modules,
    render_to_svg,
)
from bartrim.cli import main as barcode_main


SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_svg(markup):
    return ElementTree.fromstring(markup.encode("utf-8"))


def test_pattern_table():
    assert len(Code128B.pattern) == 107
    assert Code128B.pattern[Code128B.start_B] == "211214"
    assert Code128B.pattern[Code128B.stop] == "2331112"
    for pattern in Code128B.pattern[:-1]:
        assert len(pattern) == 6
        assert sum(int(digit) for digit in pattern) == 11


def test_encode_hello():
    codes = Code128B.encode("HELLO-128")
    assert codes[0] == 104
    assert codes[1:-2] == [ord(char) - 32 for char in "HELLO-128"]
    assert codes[-2] == 82
    assert codes[-1] == 106


@pytest.mark.parametrize("text, checksum", [
    ("", 1),
    ("A", 34),
    (" ", 1),
    ("~~", (104 + 94 + 94 * 2) % 103),
])
def test_checksum(text, checksum):
    assert Code128B.encode(text)[-2] == checksum


@pytest.mark.parametrize("text", ["", "x", "Hello, World!", "".join(
    chr(code) for code in range(32, 127)
)])
def test_encoded_length(text):
    codes = Code128B.encode(text)
    assert len(codes) == len(text) + 3
    assert codes[0] == 104 and codes[-1] == 106
    assert 0 <= codes[-2] <= 102
    assert Code128B.encode(text) == codes


@pytest.mark.parametrize("text, index, code_point", [
    ("abc\n", 3, 10),
    ("\x7f", 0, 127),
    ("naïve", 2, 0xef),
    ("ok€\x00", 2, 0x20ac),
])
def test_unsupported_character(text, index, code_point):
    with pytest.raises(UnsupportedCharacter) as excinfo:
        Code128B.encode(text)
    assert excinfo.value.index == index
    assert excinfo.value.code_point == code_point
    assert isinstance(excinfo.value, ValueError)


def test_pattern_not_found():
    with pytest.raises(PatternNotFound) as excinfo:
        Code128B.expand([104, 107])
    assert excinfo.value.code == 107
    with pytest.raises(PatternNotFound):
        Code128B.expand([-1])


def test_modules():
    modules = encode_to_modules("HELLO-128")
    assert modules[:6] == [2, 1, 1, 2, 1, 4]
    assert modules[-7:] == [2, 3, 3, 1, 1, 1, 2]
    assert len(modules) == 11 * 6 + 7
    assert sum(modules) == 11 * 11 + 13
    assert set(modules) <= {1, 2, 3, 4}


def test_svg_width():
    options = RenderOptions(module_width=2, height=80, quiet_zone=10)
    svg = render_to_svg("HELLO-128", options)
    root = parse_svg(svg)
    modules = encode_to_modules("HELLO-128")
    assert root.get("width") == str((sum(modules) + 20) * 2)
    assert root.get("height") == "80"


@pytest.mark.parametrize("module_width, quiet_zone", [(1, 0), (3, 10), (4, 7)])
def test_svg_geometry(module_width, quiet_zone):
    text = "bartrim"
    modules = encode_to_modules(text)
    svg = render_to_svg(
        text, module_width=module_width, quiet_zone=quiet_zone, height=50
    )
    root = parse_svg(svg)
    width = (sum(modules) + 2 * quiet_zone) * module_width
    assert root.get("width") == str(width)
    rects = root.findall(SVG_NS + "rect")
    background, bars = rects[0], rects[1:]
    assert background.get("width") == str(width)
    assert len(bars) == len(modules) // 2 + 1
    assert bars[0].get("x") == str(quiet_zone * module_width)
    assert bars[0].get("width") == str(modules[0] * module_width)
    last = bars[-1]
    assert int(last.get("x")) + int(last.get("width")) == \
        width - quiet_zone * module_width
    assert all(bar.get("height") == "50" for bar in bars)
    assert root.find(SVG_NS + "text") is None


def test_svg_caption():
    svg = render_to_svg(
        "HELLO-128",
        module_width=2,
        height=80,
        quiet_zone=10,
        display_value=True,
        font_size=14,
        text_margin=4,
    )
    root = parse_svg(svg)
    bars = root.findall(SVG_NS + "rect")[1:]
    assert all(bar.get("height") == "62" for bar in bars)
    texts = root.findall(SVG_NS + "text")
    assert len(texts) == 1
    assert texts[0].text == "HELLO-128"
    assert texts[0].get("x") == "154"
    assert texts[0].get("y") == "77.2"


def test_svg_escaping():
    text = "<a href=\"x\">&'"
    svg = render_to_svg(
        text, display_value=True, font_family="Fira \"Mono\" & co"
    )
    assert "&lt;a href=&quot;x&quot;&gt;&amp;&apos;" in svg
    root = parse_svg(svg)
    text_element = root.find(SVG_NS + "text")
    assert text_element.text == text
    assert text_element.get("font-family") == "Fira \"Mono\" & co"


def test_svg_colors():
    svg = render_to_svg("1", background="#fff", bar_color="#123456")
    root = parse_svg(svg)
    rects = root.findall(SVG_NS + "rect")
    assert rects[0].get("fill") == "#fff"
    assert {rect.get("fill") for rect in rects[1:]} == {"#123456"}


def test_svg_image_write(tmp_path):
    modules = encode_to_modules("012")
    img = SvgBarcodeImage(modules, RenderOptions(height=20), text="012")
    path = tmp_path / "test_svg_barcode_image.svg"
    with open(str(path), img.file_open_mode) as file:
        img.write(file)
    assert path.read_text() == img.data()
    assert img.image_width == (sum(modules) + 20) * 2


def test_render_options():
    options = RenderOptions(height=30)
    assert options.height == 30
    assert options.module_width == 2
    assert RenderOptions.height == 60
    assert options.replace(display_value=True).bars_height == 12
    assert options.bars_height == 30
    assert RenderOptions(height=10, display_value=True).bars_height == 0
    with pytest.raises(TypeError):
        RenderOptions(colour="red")


def test_cmd(tmp_path, capsys):
    out = tmp_path / "hello.svg"
    barcode_main(["svg", "HELLO-128", str(out)])
    root = parse_svg(out.read_text())
    assert root.get("width") == "308"
    assert root.find(SVG_NS + "text").text == "HELLO-128"

    barcode_main(["svg", "--no-label", "--module-width=1", "A"])
    root = parse_svg(capsys.readouterr().out)
    assert root.get("width") == str(11 * 3 + 13 + 20)
    assert root.find(SVG_NS + "text") is None


def test_cmd_unsupported_character(capsys):
    with pytest.raises(SystemExit) as excinfo:
        barcode_main(["svg", "café"])
    assert excinfo.value.code == 2
    assert "index 3" in capsys.readouterr().err
