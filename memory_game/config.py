tweak = {
    # Window settings
    "window_title": "Memory",
    "target_fps": 60,
    "background_color": (240, 240, 240, 255),

    # Grid
    "grid_columns": 3,
    "grid_rows": 4,
    "spacing": 10,

    # Card dimensions
    "card_width": 100,
    "card_height": 150,
    "card_corner_radius": 4,

    # Card colors
    "card_back": (0, 123, 255, 255),
    "card_front": (255, 255, 255, 255),
    "glyph_color": (255, 0, 0, 255),

    # Timings (milliseconds)
    "flip_duration": 500,
    "mismatch_delay": 1000,
    "victory_delay": 500,

    # Assets
    "assets_dir": "assets",
    "image_extension": ".jpg",

    # Victory banner / UI
    "banner_color": (0, 0, 0, 180),
    "banner_text_color": (255, 255, 255, 255),
    "banner_font_size": 28,
    "message_font_size": 12,
    "message_color": (60, 60, 60, 255),
    "button_width": 120,
    "button_height": 40,
    "button_color": (70, 130, 180, 255),
    "button_hover_color": (90, 150, 200, 255),
    "button_text_color": (255, 255, 255, 255),

    "max_messages": 50,
}
