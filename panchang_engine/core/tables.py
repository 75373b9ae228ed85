"""
tables.py
=========
Static Panchang lookup tables.

These are read-only data (tuples, frozensets and mapping proxies), shared
by the classifier and the scorer. Activity-specific rules live in the muhurat rule book
(``data/muhurat_rules.yaml``), not here.

Source: traditional Panchang tables as printed in Drik-style almanacs.
"""

from types import MappingProxyType
from typing import NamedTuple, Tuple

# ---------------------------------------------------------------------------
# Tithi
# ---------------------------------------------------------------------------

TITHI_NAMES = (
    "Pratipad", "Dwitiya", "Tritiya", "Chaturthi", "Panchami",
    "Shashthi", "Saptami", "Ashtami", "Navami", "Dashami",
    "Ekadashi", "Dwadashi", "Trayodashi", "Chaturdashi", "Purnima",
)
NEW_MOON_TITHI = "Amavasya"     # entry 15 in Krishna paksha

SHUKLA = "Shukla"               # waxing
KRISHNA = "Krishna"             # waning

# Position within the paksha (1–15)
AUSPICIOUS_TITHIS = MappingProxyType({
    SHUKLA:  frozenset({2, 3, 5, 7, 10, 11, 13, 15}),
    KRISHNA: frozenset({2, 3, 5, 7, 10, 13}),
})
# Rikta tithis (4, 9, 14), Ashtami, and the new moon
INAUSPICIOUS_TITHIS = MappingProxyType({
    SHUKLA:  frozenset({4, 8, 9, 14}),
    KRISHNA: frozenset({4, 8, 9, 14, 15}),
})

# ---------------------------------------------------------------------------
# Nakshatra
# ---------------------------------------------------------------------------

NAKSHATRA_LORDS = ("Ketu", "Venus", "Sun", "Moon", "Mars",
                   "Rahu", "Jupiter", "Saturn", "Mercury")

# Temperament → (favorable activities, unfavorable activities)
TEMPERAMENTS = MappingProxyType({
    "Fixed":  (("construction", "foundation", "property", "marriage", "planting"),
               ("travel",)),
    "Movable": (("travel", "vehicles", "business", "relocation"),
                ("foundation",)),
    "Fierce": (("confrontation", "litigation", "demolition"),
               ("marriage", "travel", "business")),
    "Mixed":  (("routine work", "fire rituals", "metalwork"),
               ("marriage",)),
    "Swift":  (("trade", "medicine", "education", "travel", "business"),
               ()),
    "Tender": (("marriage", "arts", "friendship", "clothing", "music"),
               ("confrontation",)),
    "Sharp":  (("separation", "exorcism", "surgery"),
               ("marriage", "business", "travel")),
})


class NakshatraInfo(NamedTuple):
    name:        str
    deity:       str
    symbol:      str
    gana:        str
    temperament: str
    auspicious:  bool

    @property
    def favorable(self) -> Tuple[str, ...]:
        return TEMPERAMENTS[self.temperament][0]

    @property
    def unfavorable(self) -> Tuple[str, ...]:
        return TEMPERAMENTS[self.temperament][1]


NAKSHATRAS = (
    NakshatraInfo("Ashwini",           "Ashwini Kumaras", "Horse's head",       "Deva",     "Swift",   True),
    NakshatraInfo("Bharani",           "Yama",            "Yoni",               "Manushya", "Fierce",  False),
    NakshatraInfo("Krittika",          "Agni",            "Razor",              "Rakshasa", "Mixed",   False),
    NakshatraInfo("Rohini",            "Brahma",          "Ox cart",            "Manushya", "Fixed",   True),
    NakshatraInfo("Mrigashira",        "Soma",            "Deer's head",        "Deva",     "Tender",  False),
    NakshatraInfo("Ardra",             "Rudra",           "Teardrop",           "Manushya", "Sharp",   False),
    NakshatraInfo("Punarvasu",         "Aditi",           "Bow and quiver",     "Deva",     "Movable", True),
    NakshatraInfo("Pushya",            "Brihaspati",      "Cow's udder",        "Deva",     "Swift",   True),
    NakshatraInfo("Ashlesha",          "Nagas",           "Coiled serpent",     "Rakshasa", "Sharp",   False),
    NakshatraInfo("Magha",             "Pitris",          "Royal throne",       "Rakshasa", "Fierce",  True),
    NakshatraInfo("Purva Phalguni",    "Bhaga",           "Front legs of bed",  "Manushya", "Fierce",  True),
    NakshatraInfo("Uttara Phalguni",   "Aryaman",         "Back legs of bed",   "Manushya", "Fixed",   True),
    NakshatraInfo("Hasta",             "Savitar",         "Hand",               "Deva",     "Swift",   True),
    NakshatraInfo("Chitra",            "Vishvakarma",     "Bright jewel",       "Rakshasa", "Tender",  True),
    NakshatraInfo("Swati",             "Vayu",            "Young shoot",        "Deva",     "Movable", True),
    NakshatraInfo("Vishakha",          "Indra-Agni",      "Triumphal arch",     "Rakshasa", "Mixed",   True),
    NakshatraInfo("Anuradha",          "Mitra",           "Lotus",              "Deva",     "Tender",  True),
    NakshatraInfo("Jyeshtha",          "Indra",           "Earring",            "Rakshasa", "Sharp",   False),
    NakshatraInfo("Mula",              "Nirriti",         "Bunch of roots",     "Rakshasa", "Sharp",   False),
    NakshatraInfo("Purva Ashadha",     "Apas",            "Winnowing fan",      "Manushya", "Fierce",  True),
    NakshatraInfo("Uttara Ashadha",    "Vishvedevas",     "Elephant tusk",      "Manushya", "Fixed",   True),
    NakshatraInfo("Shravana",          "Vishnu",          "Three footprints",   "Deva",     "Movable", True),
    NakshatraInfo("Dhanishtha",        "Vasus",           "Drum",               "Rakshasa", "Movable", True),
    NakshatraInfo("Shatabhisha",       "Varuna",          "Empty circle",       "Rakshasa", "Movable", True),
    NakshatraInfo("Purva Bhadrapada",  "Aja Ekapada",     "Front of funeral cot", "Manushya", "Fierce", False),
    NakshatraInfo("Uttara Bhadrapada", "Ahirbudhnya",     "Twins",              "Manushya", "Fixed",   True),
    NakshatraInfo("Revati",            "Pushan",          "Fish",               "Deva",     "Tender",  True),
)

NAKSHATRA_NAMES = tuple(n.name for n in NAKSHATRAS)

# Gand Mula nakshatras (1-based), as used by the muhurat rules
GAND_MULA_NAKSHATRAS = frozenset({5, 6, 9, 10, 12, 14, 18, 20, 22, 24, 25})

# ---------------------------------------------------------------------------
# Yoga
# ---------------------------------------------------------------------------

YOGAS = (
    "Vishkumbha", "Preeti", "Ayushman", "Saubhagya", "Shobhana",
    "Atiganda", "Sukarma", "Dhriti", "Shula", "Ganda",
    "Vriddhi", "Dhruva", "Vyaghata", "Harshana", "Vajra",
    "Siddhi", "Vyatipata", "Variyana", "Parigha", "Shiva",
    "Siddha", "Sadhya", "Shubha", "Shukla", "Brahma",
    "Indra", "Vaidhriti",
)

INAUSPICIOUS_YOGAS = frozenset({1, 6, 9, 10, 13, 15, 17, 19, 27})
NEUTRAL_YOGAS = frozenset({14, 20, 22})

# ---------------------------------------------------------------------------
# Karana
# ---------------------------------------------------------------------------

# The pinned karana, at the first and last half-tithi of the lunar month
KIMSTUGHNA = "Kimstughna"

# Rotating names for half-tithi slots 1..58
ROTATING_KARANAS = (
    "Bava", "Balava", "Kaulava", "Taitila", "Garaja",
    "Vanija", "Vishti", "Shakuni", "Chatushpada", "Nagava",
)

KARANAS = (KIMSTUGHNA,) + ROTATING_KARANAS

INAUSPICIOUS_KARANAS = frozenset({"Vishti", "Shakuni", "Chatushpada", "Nagava"})
NEUTRAL_KARANAS = frozenset({KIMSTUGHNA})

# ---------------------------------------------------------------------------
# Vara
# ---------------------------------------------------------------------------


class VaraInfo(NamedTuple):
    name:          str
    sanskrit_name: str
    lord:          str
    auspicious:    bool


# Sunday first; Vara number = index + 1
VARAS = (
    VaraInfo("Sunday",    "Ravivara",    "Sun",     True),
    VaraInfo("Monday",    "Somavara",    "Moon",    True),
    VaraInfo("Tuesday",   "Mangalavara", "Mars",    False),
    VaraInfo("Wednesday", "Budhavara",   "Mercury", True),
    VaraInfo("Thursday",  "Guruvara",    "Jupiter", True),
    VaraInfo("Friday",    "Shukravara",  "Venus",   True),
    VaraInfo("Saturday",  "Shanivara",   "Saturn",  False),
)

# ---------------------------------------------------------------------------
# Daily muhurtas (30 × 48 minutes from sunrise)
# ---------------------------------------------------------------------------

MUHURTA_NAMES = (
    "Rudra", "Ahi", "Mitra", "Pitri", "Vasu", "Varaha", "Vishvedeva",
    "Vidhi", "Sutamukhi", "Puruhuta", "Vahini", "Naktanakara",
    "Varuna", "Aryaman", "Bhaga", "Girisa", "Ajapada", "Ahirbudhnya",
    "Pushya", "Ashvini", "Yama", "Agastya", "Varuni", "Soma",
    "Rakshasa", "Gandharva", "Aditi", "Vishnu", "Dyumadgadyuti", "Brahma",
)

MUHURTA_RULING_PLANETS = ("Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn")

AUSPICIOUS_MUHURTAS = frozenset({3, 6, 7, 8, 12, 17, 19, 21, 23, 26, 27, 28, 29, 30})
INAUSPICIOUS_MUHURTAS = frozenset({2, 25})

# Activities a muhurta should not be used for
UNSUITABLE_MUHURTA_ACTIVITIES = MappingProxyType({
    1:  ("marriage", "business"),
    2:  ("marriage",),
    4:  ("marriage",),
    21: ("marriage", "business", "travel"),
    22: ("business",),
    23: ("business", "education"),
    25: ("marriage", "business", "travel"),
})

# Rahu Kaal: 1-based eighth of daylight, by weekday (0 = Sunday)
RAHU_KAAL_SLOT = (8, 2, 7, 5, 6, 4, 3)
