"""
The CSS color keywords.

Data taken from <https://www.w3.org/TR/SVG11/types.html#ColorKeywords>, which
CSS Color Module Level 3 adopted unchanged.
"""
from .palette import PaletteEntry, search
from ..color_types import RgbSpec


NAMES: tuple[PaletteEntry, ...] = (
    PaletteEntry("aliceblue", (240, 248, 255)),
    PaletteEntry("antiquewhite", (250, 235, 215)),
    PaletteEntry("aqua", (0, 255, 255)),
    PaletteEntry("aquamarine", (127, 255, 212)),
    PaletteEntry("azure", (240, 255, 255)),
    PaletteEntry("beige", (245, 245, 220)),
    PaletteEntry("bisque", (255, 228, 196)),
    PaletteEntry("black", (0, 0, 0)),
    PaletteEntry("blanchedalmond", (255, 235, 205)),
    PaletteEntry("blue", (0, 0, 255)),
    PaletteEntry("blueviolet", (138, 43, 226)),
    PaletteEntry("brown", (165, 42, 42)),
    PaletteEntry("burlywood", (222, 184, 135)),
    PaletteEntry("cadetblue", (95, 158, 160)),
    PaletteEntry("chartreuse", (127, 255, 0)),
    PaletteEntry("chocolate", (210, 105, 30)),
    PaletteEntry("coral", (255, 127, 80)),
    PaletteEntry("cornflowerblue", (100, 149, 237)),
    PaletteEntry("cornsilk", (255, 248, 220)),
    PaletteEntry("crimson", (220, 20, 60)),
    PaletteEntry("cyan", (0, 255, 255)),
    PaletteEntry("darkblue", (0, 0, 139)),
    PaletteEntry("darkcyan", (0, 139, 139)),
    PaletteEntry("darkgoldenrod", (184, 134, 11)),
    PaletteEntry("darkgray", (169, 169, 169)),
    PaletteEntry("darkgreen", (0, 100, 0)),
    PaletteEntry("darkgrey", (169, 169, 169)),
    PaletteEntry("darkkhaki", (189, 183, 107)),
    PaletteEntry("darkmagenta", (139, 0, 139)),
    PaletteEntry("darkolivegreen", (85, 107, 47)),
    PaletteEntry("darkorange", (255, 140, 0)),
    PaletteEntry("darkorchid", (153, 50, 204)),
    PaletteEntry("darkred", (139, 0, 0)),
    PaletteEntry("darksalmon", (233, 150, 122)),
    PaletteEntry("darkseagreen", (143, 188, 143)),
    PaletteEntry("darkslateblue", (72, 61, 139)),
    PaletteEntry("darkslategray", (47, 79, 79)),
    PaletteEntry("darkslategrey", (47, 79, 79)),
    PaletteEntry("darkturquoise", (0, 206, 209)),
    PaletteEntry("darkviolet", (148, 0, 211)),
    PaletteEntry("deeppink", (255, 20, 147)),
    PaletteEntry("deepskyblue", (0, 191, 255)),
    PaletteEntry("dimgray", (105, 105, 105)),
    PaletteEntry("dimgrey", (105, 105, 105)),
    PaletteEntry("dodgerblue", (30, 144, 255)),
    PaletteEntry("firebrick", (178, 34, 34)),
    PaletteEntry("floralwhite", (255, 250, 240)),
    PaletteEntry("forestgreen", (34, 139, 34)),
    PaletteEntry("fuchsia", (255, 0, 255)),
    PaletteEntry("gainsboro", (220, 220, 220)),
    PaletteEntry("ghostwhite", (248, 248, 255)),
    PaletteEntry("gold", (255, 215, 0)),
    PaletteEntry("goldenrod", (218, 165, 32)),
    PaletteEntry("gray", (128, 128, 128)),
    PaletteEntry("green", (0, 128, 0)),
    PaletteEntry("greenyellow", (173, 255, 47)),
    PaletteEntry("grey", (128, 128, 128)),
    PaletteEntry("honeydew", (240, 255, 240)),
    PaletteEntry("hotpink", (255, 105, 180)),
    PaletteEntry("indianred", (205, 92, 92)),
    PaletteEntry("indigo", (75, 0, 130)),
    PaletteEntry("ivory", (255, 255, 240)),
    PaletteEntry("khaki", (240, 230, 140)),
    PaletteEntry("lavender", (230, 230, 250)),
    PaletteEntry("lavenderblush", (255, 240, 245)),
    PaletteEntry("lawngreen", (124, 252, 0)),
    PaletteEntry("lemonchiffon", (255, 250, 205)),
    PaletteEntry("lightblue", (173, 216, 230)),
    PaletteEntry("lightcoral", (240, 128, 128)),
    PaletteEntry("lightcyan", (224, 255, 255)),
    PaletteEntry("lightgoldenrodyellow", (250, 250, 210)),
    PaletteEntry("lightgray", (211, 211, 211)),
    PaletteEntry("lightgreen", (144, 238, 144)),
    PaletteEntry("lightgrey", (211, 211, 211)),
    PaletteEntry("lightpink", (255, 182, 193)),
    PaletteEntry("lightsalmon", (255, 160, 122)),
    PaletteEntry("lightseagreen", (32, 178, 170)),
    PaletteEntry("lightskyblue", (135, 206, 250)),
    PaletteEntry("lightslategray", (119, 136, 153)),
    PaletteEntry("lightslategrey", (119, 136, 153)),
    PaletteEntry("lightsteelblue", (176, 196, 222)),
    PaletteEntry("lightyellow", (255, 255, 224)),
    PaletteEntry("lime", (0, 255, 0)),
    PaletteEntry("limegreen", (50, 205, 50)),
    PaletteEntry("linen", (250, 240, 230)),
    PaletteEntry("magenta", (255, 0, 255)),
    PaletteEntry("maroon", (128, 0, 0)),
    PaletteEntry("mediumaquamarine", (102, 205, 170)),
    PaletteEntry("mediumblue", (0, 0, 205)),
    PaletteEntry("mediumorchid", (186, 85, 211)),
    PaletteEntry("mediumpurple", (147, 112, 219)),
    PaletteEntry("mediumseagreen", (60, 179, 113)),
    PaletteEntry("mediumslateblue", (123, 104, 238)),
    PaletteEntry("mediumspringgreen", (0, 250, 154)),
    PaletteEntry("mediumturquoise", (72, 209, 204)),
    PaletteEntry("mediumvioletred", (199, 21, 133)),
    PaletteEntry("midnightblue", (25, 25, 112)),
    PaletteEntry("mintcream", (245, 255, 250)),
    PaletteEntry("mistyrose", (255, 228, 225)),
    PaletteEntry("moccasin", (255, 228, 181)),
    PaletteEntry("navajowhite", (255, 222, 173)),
    PaletteEntry("navy", (0, 0, 128)),
    PaletteEntry("oldlace", (253, 245, 230)),
    PaletteEntry("olive", (128, 128, 0)),
    PaletteEntry("olivedrab", (107, 142, 35)),
    PaletteEntry("orange", (255, 165, 0)),
    PaletteEntry("orangered", (255, 69, 0)),
    PaletteEntry("orchid", (218, 112, 214)),
    PaletteEntry("palegoldenrod", (238, 232, 170)),
    PaletteEntry("palegreen", (152, 251, 152)),
    PaletteEntry("paleturquoise", (175, 238, 238)),
    PaletteEntry("palevioletred", (219, 112, 147)),
    PaletteEntry("papayawhip", (255, 239, 213)),
    PaletteEntry("peachpuff", (255, 218, 185)),
    PaletteEntry("peru", (205, 133, 63)),
    PaletteEntry("pink", (255, 192, 203)),
    PaletteEntry("plum", (221, 160, 221)),
    PaletteEntry("powderblue", (176, 224, 230)),
    PaletteEntry("purple", (128, 0, 128)),
    PaletteEntry("red", (255, 0, 0)),
    PaletteEntry("rosybrown", (188, 143, 143)),
    PaletteEntry("royalblue", (65, 105, 225)),
    PaletteEntry("saddlebrown", (139, 69, 19)),
    PaletteEntry("salmon", (250, 128, 114)),
    PaletteEntry("sandybrown", (244, 164, 96)),
    PaletteEntry("seagreen", (46, 139, 87)),
    PaletteEntry("seashell", (255, 245, 238)),
    PaletteEntry("sienna", (160, 82, 45)),
    PaletteEntry("silver", (192, 192, 192)),
    PaletteEntry("skyblue", (135, 206, 235)),
    PaletteEntry("slateblue", (106, 90, 205)),
    PaletteEntry("slategray", (112, 128, 144)),
    PaletteEntry("slategrey", (112, 128, 144)),
    PaletteEntry("snow", (255, 250, 250)),
    PaletteEntry("springgreen", (0, 255, 127)),
    PaletteEntry("steelblue", (70, 130, 180)),
    PaletteEntry("tan", (210, 180, 140)),
    PaletteEntry("teal", (0, 128, 128)),
    PaletteEntry("thistle", (216, 191, 216)),
    PaletteEntry("tomato", (255, 99, 71)),
    PaletteEntry("turquoise", (64, 224, 208)),
    PaletteEntry("violet", (238, 130, 238)),
    PaletteEntry("wheat", (245, 222, 179)),
    PaletteEntry("white", (255, 255, 255)),
    PaletteEntry("whitesmoke", (245, 245, 245)),
    PaletteEntry("yellow", (255, 255, 0)),
    PaletteEntry("yellowgreen", (154, 205, 50)),
)


def lookup(name: str) -> None | RgbSpec:
    """Look up the lower-case CSS color name."""
    return search(NAMES, name)
