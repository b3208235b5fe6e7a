# Color palettes keyed by theme name. "progress" fills the bar while focusing, "progress_break" while on break.
THEMES = {
    "Light": {
        "bg": "#F5F5F7",
        "text": "#1D1D1F",
        "subtext": "#6E6E73",
        "button_bg": "#E3E3E8",
        "button_hover": "#D2D2D7",
        "button_text": "#1D1D1F",
        "primary_bg": "#0A84FF",
        "primary_hover": "#0060DF",
        "primary_text": "#FFFFFF",
        "disabled_text": "#A1A1A6",
        "progress_track": "#E3E3E8",
        "progress": "#0A84FF",
        "progress_break": "#30B158",
    },
    "Dark": {
        "bg": "#1E1E1E",
        "text": "#F2F2F2",
        "subtext": "#A0A0A0",
        "button_bg": "#3A3A3C",
        "button_hover": "#48484A",
        "button_text": "#F2F2F2",
        "primary_bg": "#0A84FF",
        "primary_hover": "#409CFF",
        "primary_text": "#FFFFFF",
        "disabled_text": "#636366",
        "progress_track": "#3A3A3C",
        "progress": "#0A84FF",
        "progress_break": "#32D74B",
    },
}
