"""Built-in palette themes

Hand-picked reference colors, in RGB, for each named theme. Order matters:
the palette builder walks each list front to back.
"""

from .convert import RGB

THEMES: dict[str, tuple[RGB, ...]] = {
    "warm": ((255, 100, 50), (255, 150, 0), (200, 80, 80), (180, 120, 60), (220, 180, 100)),
    "cool": ((50, 150, 255), (100, 200, 200), (150, 100, 255), (80, 180, 150), (120, 120, 200)),
    "neutral": ((140, 140, 140), (160, 160, 160), (120, 130, 125), (135, 125, 130), (125, 135, 140)),
    "earth": ((139, 69, 19), (160, 82, 45), (210, 180, 140), (107, 142, 35), (85, 107, 47)),
    "ocean": ((0, 119, 190), (0, 150, 136), (72, 201, 176), (135, 206, 235), (25, 25, 112)),
    "autumn": ((255, 140, 0), (255, 69, 0), (220, 20, 60), (184, 134, 11), (139, 69, 19)),
    "spring": ((154, 205, 50), (124, 252, 0), (173, 255, 47), (50, 205, 50), (0, 255, 127)),
    "summer": ((255, 235, 59), (255, 193, 7), (76, 175, 80), (139, 195, 74), (3, 169, 244)),
    "winter": ((224, 224, 224), (144, 164, 174), (96, 125, 139), (33, 150, 243), (0, 0, 128)),
    "pastel": ((255, 204, 204), (204, 255, 204), (204, 204, 255), (255, 255, 204), (255, 204, 255)),
    "vibrant": ((255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0), (255, 0, 255)),
    "monochrome": (
        (255, 255, 255), (224, 224, 224), (192, 192, 192),
        (128, 128, 128), (64, 64, 64), (0, 0, 0),
    ),
    "sunset": ((255, 224, 130), (255, 170, 85), (255, 110, 80), (200, 80, 120), (100, 60, 110)),
    "forest": ((34, 85, 34), (20, 60, 20), (60, 100, 60), (100, 140, 100), (140, 180, 140)),
    "warm-reds": ((200, 50, 50), (255, 100, 80), (220, 80, 60), (255, 130, 100), (180, 40, 40)),
    "cool-blues": ((50, 100, 200), (80, 150, 255), (100, 180, 230), (60, 120, 180), (40, 80, 160)),
    "neutral-grays": ((120, 120, 120), (140, 140, 140), (160, 160, 160), (100, 100, 100), (180, 180, 180)),
    # warm to cool
    "temperature-gradient": ((255, 80, 50), (255, 150, 100), (180, 180, 180), (100, 150, 200), (50, 100, 255)),
}

THEME_NAMES = tuple(THEMES)
