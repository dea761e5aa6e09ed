# Shared puzzles for the test modules

WIKI_PUZZLE = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)

WIKI_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def digits(text):
    return [0 if c == "." else int(c) for c in text]


def relabel(text):
    """Swap every digit d for d % 9 + 1; keeps a solved grid solved."""
    return "".join(str(int(c) % 9 + 1) for c in text)
