# Shared sample data. Every RGB sample is chromatic and inside the sRGB gamut
# so that hues are well defined in every space.

samples_rgb = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
    (140, 201, 100),
    (40, 9, 57),
    (200, 120, 30),
    (30, 90, 200),
    (250, 240, 230),
    (90, 20, 30),
]

# (h, s%, l%) -> 8-bit RGB
samples_hsl_rgb = {
    (0, 0, 0): (0, 0, 0),
    (0, 0, 100): (255, 255, 255),
    (96, 48, 59): (140, 201, 100),
    (279, 73, 13): (40, 9, 57),
    (0, 100, 50): (255, 0, 0),
    (120, 100, 25): (0, 128, 0),
    (240, 100, 50): (0, 0, 255),
}

# (h, s, v) in [0, 1] -> unit RGB
samples_hsv_rgb = {
    (0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (120, 1.0, 1.0): (0.0, 1.0, 0.0),
    (240, 0.5, 0.5): (0.25, 0.25, 0.5),
    (60, 1.0, 1.0): (1.0, 1.0, 0.0),
    (300, 0.0, 0.75): (0.75, 0.75, 0.75),
}

# 8-bit RGB -> reference CIE values (D65)
samples_rgb_lab = {
    (255, 0, 0): (53.2408, 80.0925, 67.2032),
    (0, 0, 255): (32.2970, 79.1875, -107.8602),
    (255, 255, 255): (100.0, 0.0, 0.0),
}

samples_rgb_luv = {
    (255, 0, 0): (53.2408, 175.0151, 37.7564),
    (255, 255, 255): (100.0, 0.0, 0.0),
}
