from app.schemas import Price

def format_amount(value: float) -> str:
    """Render a price amount without padding: 2.0 -> '2', 3.80 -> '3.8'"""
    value = float(value)
    # False for nan and inf, which fall through to repr
    if value.is_integer():
        return str(int(value))
    return repr(value)

def format_price(price: Price) -> str:
    has_base = price.base_price != 0
    has_unit = price.price_per_unit != 0

    if has_base and has_unit:
        return f"{format_amount(price.base_price)}€ + {format_amount(price.price_per_unit)}€/{price.unit}"
    if has_base:
        return f"{format_amount(price.base_price)}€"
    return f"{format_amount(price.price_per_unit)}€/{price.unit}"
