"""English dictionaries."""

AMOUNTS = (
    ("one", 1),
    ("two", 2),
    ("three", 3),
    ("four", 4),
    ("five", 5),
    ("six", 6),
    ("seven", 7),
    ("eight", 8),
    ("nine", 9),
    ("ten", 10),
)

WORDS = {
    "object-words": "build construct object create make",
    "document-words": "picture image video report document file",
    "description-words": "describe modification alteration",
    "comparison-words": "compar differ detect update change",
    "last-words": "last previous recent",
    "new-words": "new latest current",
    "all-words": "all every entire complete",
    "period-words": "day week month quarter year",
}

MESSAGES = {
    "context-empty": "No context was recognised in the request.",
    "context-keys": "The request mentions: {keys}.",
    "context-period": "Time period: {period}.",
    "context-amount": "Amount: {amount}.",
}

KEY_NAMES = {
    "object": "object",
    "document": "document",
    "description": "description",
    "comparison": "comparison",
    "last": "last",
    "new": "new",
    "all": "all",
    "period": "period",
    "amount": "amount",
}

PERIOD_NAMES = {
    "day": "day",
    "week": "week",
    "month": "month",
    "quarter": "quarter",
    "year": "year",
}
