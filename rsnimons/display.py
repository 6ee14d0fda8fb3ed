"""Terminal colours, the hospital logo and the ASCII art shown by the game."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences used to colour terminal output."""

    RESET = "\x1b[0m"
    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"

    def __str__(self) -> str:
        return self.value


def colored(text: str, color: Color) -> str:
    """Wrap ``text`` in ``color`` and reset the terminal colour afterwards."""
    return f"{color.value}{text}{Color.RESET.value}"


_BLANK = " " * 93

_LOGO_LINES: tuple[tuple[Color | None, str], ...] = (
    (None, _BLANK),
    (Color.GREEN, " ____  _   _ __  __    _    _   _    ____    _    _  _____ _____       _ _____        ___    "),
    (Color.YELLOW, "|  _ \\| | | |  \\/  |  / \\  | | | |  / ___|  / \\  | |/ |_ _|_   _|     | |_ _\\ \\      / / \\   "),
    (Color.RED, "| |_) | | | | |\\/| | / _ \\ | |_| |  \\___ \\ / _ \\ | ' / | |  | |    _  | || | \\ \\ /\\ / / _ \\  "),
    (Color.CYAN, "|  _ <| |_| | |  | |/ ___ \\|  _  |   ___) / ___ \\| . \\ | |  | |   | |_| || |  \\ V  V / ___ \\ "),
    (Color.BLUE, "|_| \\_\\\\___/|_|  |_/_/   \\_|_| |_|  |____/_/   \\_|_|\\_|___| |_|    \\___/|___|  \\_/\\_/_/   \\_\\"),
    (None, _BLANK),
    (None, _BLANK),
    (Color.MAGENTA, "    _   _ ___ __  __  ___  _   _ ____    _   _    _    _   _  ____  ___  ____               "),
    (Color.CYAN, "   | \\ | |_ _|  \\/  |/ _ \\| \\ | / ___|  | \\ | |  / \\  | \\ | |/ ___|/ _ \\|  _ \\              "),
    (Color.YELLOW, "   |  \\| || || |\\/| | | | |  \\| \\___ \\  |  \\| | / _ \\ |  \\| | |  _| | | | |_) |             "),
    (Color.RED, "   | |\\  || || |  | | |_| | |\\  |___) | | |\\  |/ ___ \\| |\\  | |_| | |_| |  _ <              "),
    (Color.GREEN, "   |_| \\_|___|_|  |_|\\___/|_| \\_|____/  |_| \\_/_/   \\_|_| \\_|\\____|\\___/|_| \\_\\             "),
    (None, _BLANK),
)


def logo() -> str:
    """Return the coloured hospital logo, ending with a colour reset."""
    lines = "".join(
        f"{color.value if color else ''}{text}\n" for color, text in _LOGO_LINES
    )
    return lines + Color.RESET.value


_DAFTAR_CHECKUP = (
    ":= = +***************#**+%          ",
    ":= = +              ...  +          ",
    ":= -.#            ..:.. .+ .        ",
    ":= =.#   .       ......  + .        ",
    ":= =.#   ...     .....   + .        ",
    ":= = * . .      ..::..  .* :        ",
    ":= =.#  ..   .:.=-:.-. ..* :        ",
    ":= =.#   .  *=+%#+@@*:...* :        ",
    ":= =.# . ...%+#=. .*#::..* :        ",
    ":= = #:+:..:.#+. . .@:...* :        ",
    " - + * :.+...=+  -  .....+ .-----:::",
    " -.+-:.  ..#%+..  .=.....*          ",
    " -.*#%+:..%%-=+.*+-::.:-.*##########",
    " -.+:#-..:+.    #@*...-:.**=...+...#",
    " -.#-%.  .=-   .-+. =--::###########",
    " #*+%#==-#:     =-===.*--*--.+::....",
    ".@%+%@*=-%.  .  +====%:--*=%%@%%%%%%",
    " -.+ + .:@@@@%#++-.....  *          ",
    " -.+ * .@@+++@@%++.      +          ",
    " -.+ =:-@****@%**++.     +          ",
    " -.+ * .##*#+:@***#..... *          ",
    " -.+ + @####  @%###=     *          ",
    " -.+ *@@%%%.   @@@@+     +          ",
    " -.+ %@@@@     %@%%#     +          ",
)

_DIAGNOSIS = (
    "--------:----::::::::::::::::::::::.",
    "------:.::::---::::::::::::::::::...",
    "----:      .:-::::::::--::::::::..::",
    "---------------------:::::::::......",
    "::::::::::::::::---::::::::::.......",
    ":::::::::::::::::-:::::::----:......",
    "::::..:.:-:::------:::::::=:........",
    "=--.....:-----===-=:...:::-:........",
    "===-:::--=-#--*%:++::..::-=--.......",
    "===----=-=%+%*%%@%+::::-:-=--..  ...",
    "=++=---=-+=*+ *.=#=::::::::--..  ...",
    "+++=---=--+@:.:.+*=-:::::::=#+==+-..",
    "=++++++==+@-+..++==-:::::-#***#%%@::",
    "===----##=*+*#-====-:::::-++@*%@@@#=",
    "===---#%=*..-%==+**=:::::-*..*@@@@==",
    "=#*++==---###=-*:..:#=+-...--:+@@===",
    "=%%%#:.........*@@@%@+-.:.:#**##*#@%",
    "-=+#@%%%#=.:::::::-*%@#@@%%%%###@@@@",
    "-=   .=@%%%%@=::::::-:--+@%#@**%@@@@",
    "..       :+%%%%%%+-----------*#@@@@@",
    "--           :+#@%%%%*============*@",
    "--               -+@%%%%@*=====+*#@@",
    "--                  .-+%@%%%%%%%%%@@",
    ":-                      .=++========",
)

_NGOBATIN = (
    "-------+-----------------===+==-----",
    "::::::-+-------=---------==-+#*+=---",
    "::::::-+-:-----**===----=+=++#*+==++",
    "::::::-+-:::::--==++=----===+#*+=-+*",
    "::::::-+:::::::==++*=:=**=--+**+=-+*",
    "::::::=-:-*-:::-*++*@%%%@%@+=**+=-+#",
    ":::::=*+%##%%+:+**++@*.***@%=**+=:+*",
    ":::::***-.:..#:+***+==....#-=**+=:+*",
    ":::::=-@...:.#:+***=%.:%%.#:=**+-::.",
    "::::::-*-*=.-.:+***-:-=+=-+@#**=-.++",
    "::::::-+=*:....+**+--###.*.*#:=%-.-=",
    ":::::++=--=+.......:-:%=+:%.*..*+:=*",
    "::::*+==...*=...*:.#*+.::=#+#:.*%==*",
    "::::-+#....+*:.::-::%--:::::-+..=.=*",
    "====+..++:.--.*=--***-::::::=+..+.=*",
    "+++++*#+.:::+##--:--.:-----:=+..*.=*",
    "------+-:::-+.......-.-++=-::+.:-.=*",
    "::::::@##%%%* ......*..-++:.-+:.@%--",
    "::::::@#**@%*=......%::.+-.**%=%**=:",
    "::::::@***@%**......@=::+-:#******=:",
    "::::::@**#@%**......@+::=+:=#%*#....",
    "::::::@###%%#*.....:@=::=#-:-:+#....",
    "::::::@@%%@@%*..:::.=::-+*::==+*....",
    "::::::@###@%#+::.....-=-++:-=-+*....",
)

_DED = (
    ":..::...............................",
    ":..::.:..:..:.:.....................",
    ":..:::::::=---+-+:..................",
    ":..:::::+=+##*%#+=:::::::..........:",
    ":..:::::*+%*-.=%#:::::::::::::::::::",
    ":..::::-:##.:...#:::::::::::::::::::",
    ":..::::::+-:==.#::::..............::",
    ":..::::::-=+--=.....................",
    ":..:-:-=*#+++:.:....................",
    ":..:::=*=:..=+=:.--:*::.:...........",
    ":..::-#=%:::.#-:.#*=--::.:::*++*...:",
    ":..::++=+*-::=:=-:::::::-@*%****#:::",
    ":..:::====+-=+:::-:+:-=#*.@%#@@@@%:.",
    "::::-+#*:::::.-=*=**.-+@:+-+=--%@*  ",
    "-::::--::::::*=*::-.-+*%----:+#%*   ",
    "-------------*%=*+...-%%=.--##-:    ",
    "====****+====%=*###*==++*===++====--",
    ".....:::.+==##=#*%%%#++-:....:-+**#:",
    "==**===+.+=====+##*   +..:::.:+:--=-",
    "##+%####-%#######=---:*=------*---=-",
    "##=#####+%##%%###:----*-------*---+-",
    "==------%###%%##-----=======+=++++++",
    "+++#.*+++##%#%##+-+:-=-:::::::+::+::",
    "***#:+*+++++***+++*.:**+++++++*-:**+",
)


def _art(lines: tuple[str, ...]) -> str:
    return "\n".join(lines) + "\n"


def ascii_daftar_checkup() -> str:
    """Return the picture shown when a patient registers for a check-up."""
    return _art(_DAFTAR_CHECKUP)


def ascii_diagnosis() -> str:
    """Return the picture shown when a doctor diagnoses a patient."""
    return _art(_DIAGNOSIS)


def ascii_ngobatin() -> str:
    """Return the picture shown when a doctor hands out medicine."""
    return _art(_NGOBATIN)


def ascii_ded() -> str:
    """Return the picture shown when a patient runs out of lives."""
    return _art(_DED)