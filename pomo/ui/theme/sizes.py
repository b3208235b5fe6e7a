# Point sizes and spacing for the single "Regular" layout.
SIZES = {
    "Regular": {
        "label": 12,
        "action": 11,
        "title": 16,
        "subtitle": 12,
        "padding": 8,
        "frame_pad": 12,
        "progress_height": 20,
    },
}
