# tollcalc/core/constants.py
from typing import Final

# ==========================
# Veckostruktur / datum
# ==========================

#: Antal dagar per vecka. Används i modulo-räkning för veckodagar.
DAYS_PER_WEEK: Final[int] = 7

#: Index för fredag i Python datetime (0 = måndag).
FRIDAY: Final[int] = 4

#: Index för lördag och söndag i Python datetime.weekday().
WEEKEND_WEEKDAYS: Final[frozenset[int]] = frozenset({5, 6})


# ==========================
# Avgiftsfria datum
# ==========================

#: Förskjutning i dagar från påskdagen för avgiftsfria påskrelaterade dagar.
#: Långfredagen (-2), påskdagen (0), annandag påsk (+1),
#: Kristi himmelsfärdsdag (+39) och pingstdagen (+49).
EASTER_OFFSETS: Final[tuple[int, ...]] = (-2, 0, 1, 39, 49)

#: Midsommarafton är första fredagen från och med detta datum (månad, dag).
MIDSUMMER_SEARCH_START: Final[tuple[int, int]] = (6, 19)

#: Hela juli är avgiftsfri.
TOLL_FREE_MONTH: Final[int] = 7
