# tollcalc/core/config.py

from typing import Final


# ==========================
# Trängselskatt (avgiftsregler)
# ==========================

#: Högsta belopp som debiteras ett fordon per kalenderdag.
#: Värdet 60 är det lagstadgade dagstaket.
DAILY_MAX_FEE: Final[int] = 60

#: Längd på ett debiteringsintervall i minuter.
#: Passager inom denna tid från intervallets start debiteras bara en gång
#: (med den högsta avgiften).
BILLING_INTERVAL_MINUTES: Final[int] = 60

#: Avgift för passager utanför alla tidsband.
NO_FEE: Final[int] = 0


# ==========================
# Tidszon
# ==========================

#: Standardtidszon för att avgöra lokalt datum och klockslag för en passage.
#: Anropare kan alltid skicka en egen zon; systemets zon läses aldrig.
DEFAULT_TIMEZONE: Final[str] = "Europe/Stockholm"


# ==========================
# Tidformat
# ==========================

#: Format för tider i tidsbanden (till exempel "06:29").
TIME_FORMAT_HM: Final[str] = "%H:%M"


# ==========================
# Inställningsfil
# ==========================

#: Standardsökväg till inställningsfilen som läses av storage.load_settings().
SETTINGS_FILE: Final[str] = "data/settings.json"
