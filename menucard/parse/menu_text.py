"""
Heuristic parser turning OCR text of a photographed menu into menu items.
Single top-to-bottom scan with one line of lookahead for descriptions.
"""

import re
from typing import List, Optional
from menucard.schemas import ExtractedMenuItem

DEFAULT_SECTION = "Main Course"

# Lowercase substrings marking a section header line
SECTION_KEYWORDS = [
    "appetizer", "starter", "soup", "salad", "main course", "entree",
    "curry", "biryani", "rice", "bread", "naan", "roti", "dessert",
    "sweet", "beverage", "drink", "juice", "shake", "special",
]

PRICE_PATTERN = re.compile(r'(?:₹|Rs\.?|INR|USD|\$|EUR|€|GBP|£)\s*([0-9]+(?:\.[0-9]{1,2})?)', re.IGNORECASE)

# Checked in this order, the first category present anywhere in the line wins
CURRENCY_MARKERS = [
    ("INR", re.compile(r'₹|Rs\.?|INR', re.IGNORECASE)),
    ("USD", re.compile(r'\$|USD', re.IGNORECASE)),
    ("EUR", re.compile(r'€|EUR', re.IGNORECASE)),
    ("GBP", re.compile(r'£|GBP', re.IGNORECASE)),
]
DEFAULT_CURRENCY = "INR"

VEGAN_KEYWORDS = ["vegan", "plant-based"]
NON_VEG_KEYWORDS = ["chicken", "mutton", "lamb", "beef", "pork", "fish", "prawn", "egg", "meat"]
VEG_KEYWORDS = ["paneer", "vegetarian", "veg", "tofu", "mushroom", "vegetable"]

DESCRIPTION_MIN_EXCLUSIVE = 10
DESCRIPTION_MAX_EXCLUSIVE = 200
HEADER_MAX_WORDS = 3

def split_menu_lines(text: str) -> List[str]:
    """Split raw OCR text into trimmed, non-blank lines, keeping order"""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]

def has_price_pattern(text: str) -> bool:
    return PRICE_PATTERN.search(text) is not None

def is_section_header(line: str) -> bool:
    """
    A header carries one of the section keywords and no price.
    Price presence always wins: "Special Thali ₹250" is an item, not a header.
    """
    if has_price_pattern(line):
        return False
    lower_line = line.lower()
    return any(keyword in lower_line for keyword in SECTION_KEYWORDS)

def capitalize_words(text: str) -> str:
    """'MAIN COURSE' -> 'Main Course'"""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))

def detect_currency(text: str) -> str:
    for code, pattern in CURRENCY_MARKERS:
        if pattern.search(text):
            return code
    return DEFAULT_CURRENCY

def clean_item_name(raw_name: str) -> str:
    """Strip leading '12. ' numbering and '- ' bullets"""
    name = raw_name.strip()
    name = re.sub(r'^[0-9]+\.\s*', '', name)
    name = re.sub(r'^-\s*', '', name)
    return name.strip()

def detect_diet_type(text: str) -> Optional[str]:
    lower = text.lower()

    if any(keyword in lower for keyword in VEGAN_KEYWORDS):
        return "vegan"

    if any(keyword in lower for keyword in NON_VEG_KEYWORDS):
        return "non-veg"

    if any(keyword in lower for keyword in VEG_KEYWORDS):
        return "veg"

    return None

def score_confidence(name: str, price: float, description: str) -> str:
    if len(name) > 3 and price > 0 and len(description) > 10:
        return "high"
    # Names this short are already rejected before scoring
    if len(name) < 3 or price == 0:
        return "low"
    return "medium"

def looks_like_header(line: str) -> bool:
    """Short keyword lines such as 'Main Course' or 'Rice & Breads'"""
    return is_section_header(line) and len(line.split()) <= HEADER_MAX_WORDS

def _take_description(line: str) -> bool:
    # Keyword-bearing sentences are still descriptions
    if has_price_pattern(line) or looks_like_header(line):
        return False
    return DESCRIPTION_MIN_EXCLUSIVE < len(line) < DESCRIPTION_MAX_EXCLUSIVE

def parse_menu_text(text: str) -> List[ExtractedMenuItem]:
    """
    Parse OCR text into structured menu items.

    - Header lines (keyword, no price) switch the current section
    - Priced lines become items named by the text before the price
    - A plain line right after an item is used as its description
    - Everything else is ignored

    Thousands separators are not understood: "₹1,200" reads as 1.
    """
    items: List[ExtractedMenuItem] = []
    lines = split_menu_lines(text)

    current_section = DEFAULT_SECTION
    i = 0

    while i < len(lines):
        line = lines[i]

        if is_section_header(line):
            current_section = capitalize_words(line)
            i += 1
            continue

        price_match = PRICE_PATTERN.search(line)
        if price_match:
            price = float(price_match.group(1))
            currency = detect_currency(line)
            name = clean_item_name(line[:price_match.start()])

            if len(name) > 2 and price > 0:
                description = ""
                if i + 1 < len(lines) and _take_description(lines[i + 1]):
                    description = lines[i + 1]
                    i += 1

                items.append(ExtractedMenuItem(
                    name=name,
                    price=price,
                    currency=currency,
                    section=current_section,
                    description=description,
                    ingredients="",
                    is_todays_special=False,
                    is_unavailable=False,
                    diet_type=detect_diet_type(f"{name} {description}"),
                    confidence=score_confidence(name, price, description),
                ))

        i += 1

    return items
