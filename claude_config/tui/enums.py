from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


EXISTS_STYLE = {
    True: UIStyle.GREEN.value,
    False: UIStyle.DIM.value,
}
