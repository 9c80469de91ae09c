from constants import DEFAULT_BADGE, STATUS_BADGE_COLORS, STATUS_ROW_ACCENTS

#display metadata for list rows, derived from status only. Nothing here holds state

def status_value(status) -> str:
    return getattr(status, "value", status) #works for both enum members and raw strings

def status_badge(status) -> str:
    return STATUS_BADGE_COLORS.get(status_value(status), DEFAULT_BADGE)

def row_accent(status) -> str:
    return STATUS_ROW_ACCENTS.get(status_value(status), "")

def status_label(status) -> str:
    return status_value(status).capitalize()

def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}" #en-US style, e.g. $1,250.00

def display_metadata(status) -> dict:
    return {
        "label": status_label(status),
        "badge": status_badge(status),
        "row_accent": row_accent(status),
    }
