def format_inr(paise: int) -> str:
    """Format paise as an Indian-grouped rupee string: 12345600 -> '₹1,23,456.00'"""
    sign = "-" if paise < 0 else ""
    rupees, rem = divmod(abs(paise), 100)
    digits = str(rupees)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups) + "," + tail
    return f"{sign}₹{digits}.{rem:02d}"


def parse_inr(text: str) -> int | None:
    """Parse a rupee amount string into paise. Returns None on invalid input.

    Accepts formats like '2850', '2850.50', '2,850.50', '₹1,23,456'.
    """
    text = text.strip().replace("₹", "").replace(",", "").strip()
    if not text:
        return None
    try:
        return int(round(float(text) * 100))
    except (ValueError, OverflowError):
        return None
