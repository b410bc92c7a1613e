from typing import Optional, Union

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}
DEFAULT_CURRENCY = "INR"

def format_price(price: Union[float, int, str], currency: Optional[str] = None) -> str:
    """
    Format a price with its currency symbol.
    Examples: 350 -> '₹350', (12.5, 'USD') -> '$12.50', 'abc' -> '₹0'
    """
    symbol = CURRENCY_SYMBOLS.get(currency or DEFAULT_CURRENCY, CURRENCY_SYMBOLS[DEFAULT_CURRENCY])

    try:
        value = float(price)
    except (TypeError, ValueError):
        return f"{symbol}0"

    formatted = f"{value:.2f}"
    if formatted.endswith(".00"):
        formatted = formatted[:-3]
    return f"{symbol}{formatted}"
