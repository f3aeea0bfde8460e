from dataclasses import dataclass


@dataclass
class BoxChars:

    top_left: str = "+"
    top_right: str = "+"
    bottom_left: str = "+"
    bottom_right: str = "+"

    horizontal: str = "-"
    vertical: str = "|"

    arrow_right: str = ">"
    arrow_left: str = "<"

    # notes keep the folded corner at the top right
    note_top_left: str = "-"
    note_fold: str = "\\"
    note_bottom_left: str = "|"
    note_bottom_right: str = "|"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"ascii", "plain"}:
            return cls()
        if key in {"square", "line", "box"}:
            return cls(
                top_left="┌",
                top_right="┐",
                bottom_left="└",
                bottom_right="┘",
                horizontal="─",
                vertical="│",
                arrow_right="►",
                arrow_left="◄",
                note_top_left="┌",
                note_fold="╲",
                note_bottom_left="└",
                note_bottom_right="┘",
            )
        if key in {"rounded", "round", "modern"}:
            return cls(
                top_left="╭",
                top_right="╮",
                bottom_left="╰",
                bottom_right="╯",
                horizontal="─",
                vertical="│",
                arrow_right="►",
                arrow_left="◄",
                note_top_left="╭",
                note_fold="╲",
                note_bottom_left="╰",
                note_bottom_right="╯",
            )
        raise ValueError(f"Unknown box style: {style}")
