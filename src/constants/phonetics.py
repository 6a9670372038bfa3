# Letter-level confusion classes: target -> letters heard as a near miss.
# Vowel pairs, voiced/unvoiced pairs, nasals and liquids.
PHONETIC_SIMILARITY = {
    "a": {"a", "e"},
    "e": {"e", "a", "i"},
    "i": {"i", "e"},
    "o": {"o", "u"},
    "u": {"u", "o"},
    "p": {"p", "b"},
    "b": {"b", "p"},
    "t": {"t", "d"},
    "d": {"d", "t"},
    "k": {"k", "g"},
    "g": {"g", "k"},
    "f": {"f", "v"},
    "v": {"v", "f"},
    "s": {"s", "z"},
    "z": {"z", "s"},
    "m": {"m", "n"},
    "n": {"n", "m"},
    "l": {"l", "r"},
    "r": {"r", "l"},
}

VOWELS = {"a", "e", "i", "o", "u"}

PLOSIVES = {"p", "b", "t", "d", "k", "g"}

# Groups used to word mismatch labels, checked in order.
CONFUSION_LABELS = [
    ({"e", "i"}, "Close, try"),
    ({"o", "a"}, "Almost, try"),
    ({"s", "z"}, "Wrong voicing"),
]
