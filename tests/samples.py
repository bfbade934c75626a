"""Reference values shared by the test modules."""

# LCH -> device color, exact (neutral colors, no quantization ambiguity)
samples_lch_rgb = {
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.0, 80.0, 120.0): (0, 0, 0),
    (50.0, 0.0, 0.0): (119, 119, 119),
    (50.0, 0.0, 275.0): (119, 119, 119),
    (100.0, 0.0, 0.0): (255, 255, 255),
}

# device color -> LCH(uv), D65, checked within 0.1 (L) / 0.5 (C, h)
samples_rgb_lch = {
    (255, 0, 0): (53.24, 179.04, 12.17),
    (0, 255, 0): (87.73, 135.78, 127.72),
    (0, 0, 255): (32.30, 130.69, 265.87),
}

# device color -> hex
samples_rgb_hex = {
    (0, 0, 0): "#000000",
    (255, 255, 255): "#FFFFFF",
    (255, 0, 0): "#FF0000",
    (0, 128, 255): "#0080FF",
    (18, 52, 86): "#123456",
    (171, 205, 239): "#ABCDEF",
}

# colors well inside the sRGB gamut, away from the cyan corner
samples_lch_in_gamut = [
    (60.0, 40.0, 0.0),
    (60.0, 40.0, 60.0),
    (70.0, 40.0, 120.0),
    (50.0, 40.0, 250.0),
    (50.0, 40.0, 300.0),
    (40.0, 40.0, 20.0),
]

invalid_hex = [
    "#GGHHII",
    "not-a-color",
    "#12345",
    "#1234567",
    "123456",
    "",
    " #123456",
    "#123456\n",
    "#12345G",
    "##12345",
]
