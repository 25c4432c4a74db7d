"""Named color palettes addressable from RSML source.

Three fixed vocabularies, each behind its own namespace prefix:

- `tw:<hue>[:<shade>]` - Tailwind CSS palette (22 hues x 11 shades, default shade 500)
- `css:<name>` - CSS named colors
- `bc:<name>` - Roblox BrickColor names, lowercased with spaces and punctuation removed
"""

from typing import Final

TW_SHADES: Final[tuple[str, ...]] = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
TW_DEFAULT_SHADE: Final[str] = "500"

TW_PALETTE: Final[dict[str, tuple[str, ...]]] = {
    "slate": ("f8fafc", "f1f5f9", "e2e8f0", "cbd5e1", "94a3b8", "64748b", "475569", "334155", "1e293b", "0f172a", "020617"),
    "gray": ("f9fafb", "f3f4f6", "e5e7eb", "d1d5db", "9ca3af", "6b7280", "4b5563", "374151", "1f2937", "111827", "030712"),
    "zinc": ("fafafa", "f4f4f5", "e4e4e7", "d4d4d8", "a1a1aa", "71717a", "52525b", "3f3f46", "27272a", "18181b", "09090b"),
    "neutral": ("fafafa", "f5f5f5", "e5e5e5", "d4d4d4", "a3a3a3", "737373", "525252", "404040", "262626", "171717", "0a0a0a"),
    "stone": ("fafaf9", "f5f5f4", "e7e5e4", "d6d3d1", "a8a29e", "78716c", "57534e", "44403c", "292524", "1c1917", "0c0a09"),
    "red": ("fef2f2", "fee2e2", "fecaca", "fca5a5", "f87171", "ef4444", "dc2626", "b91c1c", "991b1b", "7f1d1d", "450a0a"),
    "orange": ("fff7ed", "ffedd5", "fed7aa", "fdba74", "fb923c", "f97316", "ea580c", "c2410c", "9a3412", "7c2d12", "431407"),
    "amber": ("fffbeb", "fef3c7", "fde68a", "fcd34d", "fbbf24", "f59e0b", "d97706", "b45309", "92400e", "78350f", "451a03"),
    "yellow": ("fefce8", "fef9c3", "fef08a", "fde047", "facc15", "eab308", "ca8a04", "a16207", "854d0e", "713f12", "422006"),
    "lime": ("f7fee7", "ecfccb", "d9f99d", "bef264", "a3e635", "84cc16", "65a30d", "4d7c0f", "3f6212", "365314", "1a2e05"),
    "green": ("f0fdf4", "dcfce7", "bbf7d0", "86efac", "4ade80", "22c55e", "16a34a", "15803d", "166534", "14532d", "052e16"),
    "emerald": ("ecfdf5", "d1fae5", "a7f3d0", "6ee7b7", "34d399", "10b981", "059669", "047857", "065f46", "064e3b", "022c22"),
    "teal": ("f0fdfa", "ccfbf1", "99f6e4", "5eead4", "2dd4bf", "14b8a6", "0d9488", "0f766e", "115e59", "134e4a", "042f2e"),
    "cyan": ("ecfeff", "cffafe", "a5f3fc", "67e8f9", "22d3ee", "06b6d4", "0891b2", "0e7490", "155e75", "164e63", "083344"),
    "sky": ("f0f9ff", "e0f2fe", "bae6fd", "7dd3fc", "38bdf8", "0ea5e9", "0284c7", "0369a1", "075985", "0c4a6e", "082f49"),
    "blue": ("eff6ff", "dbeafe", "bfdbfe", "93c5fd", "60a5fa", "3b82f6", "2563eb", "1d4ed8", "1e40af", "1e3a8a", "172554"),
    "indigo": ("eef2ff", "e0e7ff", "c7d2fe", "a5b4fc", "818cf8", "6366f1", "4f46e5", "4338ca", "3730a3", "312e81", "1e1b4b"),
    "violet": ("f5f3ff", "ede9fe", "ddd6fe", "c4b5fd", "a78bfa", "8b5cf6", "7c3aed", "6d28d9", "5b21b6", "4c1d95", "2e1065"),
    "purple": ("faf5ff", "f3e8ff", "e9d5ff", "d8b4fe", "c084fc", "a855f7", "9333ea", "7e22ce", "6b21a8", "581c87", "3b0764"),
    "fuchsia": ("fdf4ff", "fae8ff", "f5d0fe", "f0abfc", "e879f9", "d946ef", "c026d3", "a21caf", "86198f", "701a75", "4a044e"),
    "pink": ("fdf2f8", "fce7f3", "fbcfe8", "f9a8d4", "f472b6", "ec4899", "db2777", "be185d", "9d174d", "831843", "500724"),
    "rose": ("fff1f2", "ffe4e6", "fecdd3", "fda4af", "fb7185", "f43f5e", "e11d48", "be123c", "9f1239", "881337", "4c0519"),
}

CSS_PALETTE: Final[dict[str, str]] = {
    "aliceblue": "f0f8ff",
    "antiquewhite": "faebd7",
    "aqua": "00ffff",
    "aquamarine": "7fffd4",
    "azure": "f0ffff",
    "beige": "f5f5dc",
    "bisque": "ffe4c4",
    "black": "000000",
    "blanchedalmond": "ffebcd",
    "blue": "0000ff",
    "blueviolet": "8a2be2",
    "brown": "a52a2a",
    "burlywood": "deb887",
    "cadetblue": "5f9ea0",
    "chartreuse": "7fff00",
    "chocolate": "d2691e",
    "coral": "ff7f50",
    "cornflowerblue": "6495ed",
    "cornsilk": "fff8dc",
    "crimson": "dc143c",
    "cyan": "00ffff",
    "darkblue": "00008b",
    "darkcyan": "008b8b",
    "darkgoldenrod": "b8860b",
    "darkgray": "a9a9a9",
    "darkgreen": "006400",
    "darkgrey": "a9a9a9",
    "darkkhaki": "bdb76b",
    "darkmagenta": "8b008b",
    "darkolivegreen": "556b2f",
    "darkorange": "ff8c00",
    "darkorchid": "9932cc",
    "darkred": "8b0000",
    "darksalmon": "e9967a",
    "darkseagreen": "8fbc8f",
    "darkslateblue": "483d8b",
    "darkslategray": "2f4f4f",
    "darkslategrey": "2f4f4f",
    "darkturquoise": "00ced1",
    "darkviolet": "9400d3",
    "deeppink": "ff1493",
    "deepskyblue": "00bfff",
    "dimgray": "696969",
    "dimgrey": "696969",
    "dodgerblue": "1e90ff",
    "firebrick": "b22222",
    "floralwhite": "fffaf0",
    "forestgreen": "228b22",
    "fuchsia": "ff00ff",
    "gainsboro": "dcdcdc",
    "ghostwhite": "f8f8ff",
    "goldenrod": "daa520",
    "gold": "ffd700",
    "gray": "808080",
    "green": "008000",
    "greenyellow": "adff2f",
    "grey": "808080",
    "honeydew": "f0fff0",
    "hotpink": "ff69b4",
    "indianred": "cd5c5c",
    "indigo": "4b0082",
    "ivory": "fffff0",
    "khaki": "f0e68c",
    "lavenderblush": "fff0f5",
    "lavender": "e6e6fa",
    "lawngreen": "7cfc00",
    "lemonchiffon": "fffacd",
    "lightblue": "add8e6",
    "lightcoral": "f08080",
    "lightcyan": "e0ffff",
    "lightgoldenrodyellow": "fafad2",
    "lightgray": "d3d3d3",
    "lightgreen": "90ee90",
    "lightgrey": "d3d3d3",
    "lightpink": "ffb6c1",
    "lightsalmon": "ffa07a",
    "lightseagreen": "20b2aa",
    "lightskyblue": "87cefa",
    "lightslategray": "778899",
    "lightslategrey": "778899",
    "lightsteelblue": "b0c4de",
    "lightyellow": "ffffe0",
    "lime": "00ff00",
    "limegreen": "32cd32",
    "linen": "faf0e6",
    "magenta": "ff00ff",
    "maroon": "800000",
    "mediumaquamarine": "66cdaa",
    "mediumblue": "0000cd",
    "mediumorchid": "ba55d3",
    "mediumpurple": "9370db",
    "mediumseagreen": "3cb371",
    "mediumslateblue": "7b68ee",
    "mediumspringgreen": "00fa9a",
    "mediumturquoise": "48d1cc",
    "mediumvioletred": "c71585",
    "midnightblue": "191970",
    "mintcream": "f5fffa",
    "mistyrose": "ffe4e1",
    "moccasin": "ffe4b5",
    "navajowhite": "ffdead",
    "navy": "000080",
    "oldlace": "fdf5e6",
    "olive": "808000",
    "olivedrab": "6b8e23",
    "orange": "ffa500",
    "orangered": "ff4500",
    "orchid": "da70d6",
    "palegoldenrod": "eee8aa",
    "palegreen": "98fb98",
    "paleturquoise": "afeeee",
    "palevioletred": "db7093",
    "papayawhip": "ffefd5",
    "peachpuff": "ffdab9",
    "peru": "cd853f",
    "pink": "ffc0cb",
    "plum": "dda0dd",
    "powderblue": "b0e0e6",
    "purple": "800080",
    "rebeccapurple": "663399",
    "red": "ff0000",
    "rosybrown": "bc8f8f",
    "royalblue": "4169e1",
    "saddlebrown": "8b4513",
    "salmon": "fa8072",
    "sandybrown": "f4a460",
    "seagreen": "2e8b57",
    "seashell": "fff5ee",
    "sienna": "a0522d",
    "silver": "c0c0c0",
    "skyblue": "87ceeb",
    "slateblue": "6a5acd",
    "slategray": "708090",
    "slategrey": "708090",
    "snow": "fffafa",
    "springgreen": "00ff7f",
    "steelblue": "4682b4",
    "tan": "d2b48c",
    "teal": "008080",
    "thistle": "d8bfd8",
    "tomato": "ff6347",
    "turquoise": "40e0d0",
    "violet": "ee82ee",
    "wheat": "f5deb3",
    "white": "ffffff",
    "whitesmoke": "f5f5f5",
    "yellow": "ffff00",
    "yellowgreen": "9acd32",
}

# RGB 0-255. Where two BrickColors share a flattened name the lower palette number wins.
BC_PALETTE: Final[dict[str, tuple[int, int, int]]] = {
    "white": (242, 243, 243),
    "grey": (161, 165, 162),
    "lightyellow": (249, 233, 153),
    "brickyellow": (215, 197, 154),
    "lightgreen": (194, 218, 184),
    "lightreddishviolet": (232, 186, 200),
    "pastelblue": (128, 187, 219),
    "lightorangebrown": (203, 132, 66),
    "nougat": (204, 142, 105),
    "brightred": (196, 40, 28),
    "medreddishviolet": (196, 112, 160),
    "brightblue": (13, 105, 172),
    "brightyellow": (245, 205, 48),
    "earthorange": (98, 71, 50),
    "black": (27, 42, 53),
    "darkgrey": (109, 110, 108),
    "darkgreen": (40, 127, 71),
    "mediumgreen": (161, 196, 140),
    "ligyellowichorange": (243, 207, 155),
    "brightgreen": (75, 151, 75),
    "darkorange": (160, 95, 53),
    "lightbluishviolet": (193, 202, 222),
    "transparent": (236, 236, 236),
    "trred": (205, 84, 75),
    "trlgblue": (193, 223, 240),
    "trblue": (123, 182, 232),
    "tryellow": (247, 241, 141),
    "lightblue": (180, 210, 228),
    "trflureddishorange": (217, 133, 108),
    "trgreen": (132, 182, 141),
    "trflugreen": (248, 241, 132),
    "phosphwhite": (236, 232, 222),
    "lightred": (238, 196, 182),
    "mediumred": (218, 134, 122),
    "mediumblue": (110, 153, 202),
    "lightgrey": (199, 193, 183),
    "brightviolet": (107, 50, 124),
    "bryellowishorange": (226, 155, 64),
    "brightorange": (218, 133, 65),
    "brightbluishgreen": (0, 143, 156),
    "earthyellow": (104, 92, 67),
    "brightbluishviolet": (67, 84, 147),
    "trbrown": (191, 183, 177),
    "mediumbluishviolet": (104, 116, 172),
    "trmedireddishviolet": (229, 173, 200),
    "medyellowishgreen": (199, 210, 60),
    "medbluishgreen": (85, 165, 175),
    "lightbluishgreen": (183, 215, 213),
    "bryellowishgreen": (164, 189, 71),
    "ligyellowishgreen": (217, 228, 167),
    "medyellowishorange": (231, 172, 88),
    "brreddishorange": (211, 111, 76),
    "brightreddishviolet": (146, 57, 120),
    "lightorange": (234, 184, 146),
    "trbrightbluishviolet": (165, 165, 203),
    "gold": (220, 188, 129),
    "darknougat": (174, 122, 89),
    "silver": (156, 163, 168),
    "neonorange": (213, 115, 61),
    "neongreen": (216, 221, 86),
    "sandblue": (116, 134, 157),
    "sandviolet": (135, 124, 144),
    "mediumorange": (224, 152, 100),
    "sandyellow": (149, 138, 115),
    "earthblue": (32, 58, 86),
    "earthgreen": (39, 70, 45),
    "trflublue": (207, 226, 247),
    "sandbluemetallic": (121, 136, 161),
    "sandvioletmetallic": (149, 142, 163),
    "sandyellowmetallic": (147, 135, 103),
    "darkgreymetallic": (87, 88, 87),
    "blackmetallic": (22, 29, 50),
    "lightgreymetallic": (171, 173, 172),
    "sandgreen": (120, 144, 130),
    "sandred": (149, 121, 119),
    "darkred": (123, 46, 47),
    "trfluyellow": (255, 246, 123),
    "trflured": (225, 164, 194),
    "gunmetallic": (117, 108, 98),
    "redflipflop": (151, 105, 91),
    "yellowflipflop": (180, 132, 85),
    "silverflipflop": (137, 135, 136),
    "curry": (215, 169, 75),
    "fireyellow": (249, 214, 46),
    "flameyellowishorange": (232, 171, 45),
    "reddishbrown": (105, 64, 40),
    "flamereddishorange": (207, 96, 36),
    "mediumstonegrey": (163, 162, 165),
    "royalblue": (70, 103, 164),
    "darkroyalblue": (35, 71, 139),
    "brightreddishlilac": (142, 66, 133),
    "darkstonegrey": (99, 95, 98),
    "lemonmetalic": (130, 138, 93),
    "lightstonegrey": (229, 228, 223),
    "darkcurry": (176, 142, 68),
    "fadedgreen": (112, 149, 120),
    "turquoise": (121, 181, 181),
    "lightroyalblue": (159, 195, 233),
    "mediumroyalblue": (108, 129, 183),
    "brown": (124, 92, 70),
    "reddishlilac": (150, 112, 159),
    "lightlilac": (167, 169, 206),
    "brightpurple": (205, 98, 152),
    "lightpurple": (228, 173, 200),
    "lightpink": (220, 144, 149),
    "lightbrickyellow": (240, 213, 160),
    "warmyellowishorange": (235, 184, 127),
    "coolyellow": (253, 234, 141),
    "doveblue": (125, 187, 221),
    "mediumlilac": (52, 43, 117),
    "slimegreen": (80, 109, 84),
    "smokygrey": (91, 93, 105),
    "darkblue": (0, 16, 176),
    "parsleygreen": (44, 101, 29),
    "steelblue": (82, 124, 174),
    "stormblue": (51, 88, 130),
    "lapis": (16, 42, 220),
    "darkindigo": (61, 21, 133),
    "seagreen": (52, 142, 64),
    "shamrock": (91, 154, 76),
    "fossil": (159, 161, 172),
    "mulberry": (89, 34, 89),
    "forestgreen": (31, 128, 29),
    "cadetblue": (159, 173, 192),
    "electricblue": (9, 137, 207),
    "eggplant": (123, 0, 123),
    "moss": (124, 156, 107),
    "artichoke": (138, 171, 133),
    "sagegreen": (185, 196, 177),
    "ghostgrey": (202, 203, 209),
    "lilac": (107, 98, 155),
    "plum": (123, 47, 123),
    "olivine": (148, 190, 129),
    "laurelgreen": (168, 189, 153),
    "quillgrey": (223, 223, 222),
    "crimson": (151, 0, 0),
    "mint": (177, 229, 166),
    "babyblue": (152, 194, 219),
    "carnationpink": (255, 152, 220),
    "persimmon": (255, 89, 89),
    "maroon": (117, 0, 0),
    "daisyorange": (248, 217, 109),
    "pearl": (231, 231, 236),
    "fog": (199, 212, 228),
    "salmon": (255, 148, 148),
    "terracotta": (190, 104, 98),
    "cocoa": (86, 36, 36),
    "wheat": (241, 231, 199),
    "buttermilk": (254, 243, 187),
    "mauve": (224, 178, 208),
    "sunrise": (212, 144, 189),
    "tawny": (150, 85, 85),
    "rust": (143, 76, 42),
    "cashmere": (211, 190, 150),
    "khaki": (226, 220, 188),
    "lilywhite": (237, 234, 234),
    "seashell": (233, 218, 218),
    "burgundy": (136, 62, 62),
    "cork": (188, 155, 93),
    "burlap": (199, 172, 120),
    "beige": (202, 191, 163),
    "oyster": (187, 179, 178),
    "pinecone": (108, 88, 75),
    "fawnbrown": (160, 132, 79),
    "hurricanegrey": (149, 137, 136),
    "cloudygrey": (171, 168, 158),
    "linen": (175, 148, 131),
    "copper": (150, 103, 102),
    "mediumbrown": (86, 66, 54),
    "bronze": (126, 104, 63),
    "flint": (105, 102, 92),
    "darktaupe": (90, 76, 66),
    "burntsienna": (106, 57, 9),
    "institutionalwhite": (248, 248, 248),
    "midgray": (205, 205, 205),
    "reallyblack": (17, 17, 17),
    "reallyred": (255, 0, 0),
    "deeporange": (255, 176, 0),
    "alder": (180, 128, 255),
    "dustyrose": (163, 75, 75),
    "olive": (193, 190, 66),
    "newyeller": (255, 255, 0),
    "reallyblue": (0, 0, 255),
    "navyblue": (0, 32, 96),
    "deepblue": (33, 84, 185),
    "cyan": (4, 175, 236),
    "cgabrown": (170, 85, 0),
    "magenta": (170, 0, 170),
    "pink": (255, 102, 204),
    "teal": (18, 238, 212),
    "toothpaste": (0, 255, 255),
    "limegreen": (0, 255, 0),
    "camo": (58, 125, 21),
    "grime": (127, 142, 100),
    "lavender": (140, 91, 159),
    "pastellightblue": (175, 221, 255),
    "pastelorange": (255, 201, 201),
    "pastelviolet": (177, 167, 255),
    "pastelbluegreen": (159, 243, 233),
    "pastelgreen": (204, 255, 204),
    "pastelyellow": (255, 255, 204),
    "pastelbrown": (255, 204, 153),
    "royalpurple": (98, 37, 209),
    "hotpink": (255, 0, 191),
}
