"""German dictionaries.

German nouns are capitalised, so the period and document patterns are too.
"""

AMOUNTS = (
    ("eins", 1),
    ("zwei", 2),
    ("drei", 3),
    ("vier", 4),
    ("fünf", 5),
    ("sechs", 6),
    ("sieben", 7),
    ("acht", 8),
    ("neun", 9),
    ("zehn", 10),
)

WORDS = {
    "object-words": "bauen erstell Objekt konstruier mach",
    "document-words": "Bild Foto Video Bericht Dokument Datei",
    "description-words": "beschreib Änderung Modifikation",
    "comparison-words": "vergleich Vergleich Unterschied erkenn aktualisier",
    "last-words": "letzte vorherige vorige kürzlich",
    "new-words": "neue neuen neuer aktuell",
    "all-words": "alle jede gesamt komplett",
    "period-words": "Tag Woche Monat Quartal Jahr",
}

MESSAGES = {
    "context-empty": "In der Anfrage wurde kein Kontext erkannt.",
    "context-keys": "Die Anfrage erwähnt: {keys}.",
    "context-period": "Zeitraum: {period}.",
    "context-amount": "Anzahl: {amount}.",
}

KEY_NAMES = {
    "object": "Objekt",
    "document": "Dokument",
    "description": "Beschreibung",
    "comparison": "Vergleich",
    "last": "letzte",
    "new": "neu",
    "all": "alle",
    "period": "Zeitraum",
    "amount": "Anzahl",
}

PERIOD_NAMES = {
    "day": "Tag",
    "week": "Woche",
    "month": "Monat",
    "quarter": "Quartal",
    "year": "Jahr",
}
