# RGB (0..255) -> HSV (degrees, 0..1, 0..1)
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (255, 255, 0): (60.0, 1.0, 1.0),
    (0, 255, 0): (120.0, 1.0, 1.0),
    (0, 255, 255): (180.0, 1.0, 1.0),
    (0, 0, 255): (240.0, 1.0, 1.0),
    (255, 0, 255): (300.0, 1.0, 1.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
}

# HSV -> HSL
samples_hsv_hsl = {
    (0, 1, 1): (0, 1, 0.5),
    (0, 0, 1): (0, 0, 1),
    (0, 0, 0): (0, 0, 0),
    (120, 0.5, 0.5): (120, 1 / 3, 0.375),
    (240, 1, 0.5): (240, 1, 0.25),
}

samples_rgb_hex = {
    (255, 0, 0): "#ff0000",
    (0, 128, 255): "#0080ff",
    (1, 2, 3): "#010203",
    (255, 255, 255): "#ffffff",
    (0, 0, 0): "#000000",
}

samples_rgb_cmyk = {
    (255, 0, 0): (0, 100, 100, 0),
    (0, 255, 255): (100, 0, 0, 0),
    (0, 0, 0): (0, 0, 0, 100),
    (255, 255, 255): (0, 0, 0, 0),
    (128, 64, 0): (0, 50, 100, 50),
}

# a spread of byte triples for round trips
samples_rgb_grid = [
    (r, g, b)
    for r in (0, 17, 128, 200, 255)
    for g in (0, 64, 153, 255)
    for b in (0, 31, 250)
]
