"""Fixed service catalogs, one per profession/specialization.

Names are "Hungarian / English"; the settings screen shows the part before
the slash. Prices are in HUF. Colors are rich style names used for the
appointment blocks.
"""

SERVICES_WOMEN = [
    {"id": "w_cut", "name": "Női hajvágás / Women's Cut", "duration": 60, "price": 8500, "color": "magenta"},
    {"id": "w_blow", "name": "Mosás + szárítás / Wash & Blow-dry", "duration": 45, "price": 6000, "color": "bright_magenta"},
    {"id": "w_color", "name": "Festés / Coloring", "duration": 120, "price": 18000, "color": "red"},
    {"id": "w_balayage", "name": "Balayage / Balayage", "duration": 180, "price": 32000, "color": "bright_red"},
    {"id": "w_updo", "name": "Alkalmi frizura / Updo", "duration": 90, "price": 14000, "color": "yellow"},
    {"id": "w_treatment", "name": "Hajpakolás / Hair Treatment", "duration": 30, "price": 5000, "color": "bright_yellow"},
]

SERVICES_MEN = [
    {"id": "m_cut", "name": "Férfi hajvágás / Men's Cut", "duration": 30, "price": 5500, "color": "blue"},
    {"id": "m_beard", "name": "Szakáll igazítás / Beard Trim", "duration": 20, "price": 3500, "color": "cyan"},
    {"id": "m_combo", "name": "Haj + szakáll / Cut & Beard", "duration": 45, "price": 8000, "color": "bright_blue"},
    {"id": "m_shave", "name": "Borotválás / Hot Towel Shave", "duration": 30, "price": 5000, "color": "bright_cyan"},
    {"id": "m_kids", "name": "Gyerek hajvágás / Kids Cut", "duration": 20, "price": 3500, "color": "green"},
]

SERVICES_NAILS = [
    {"id": "n_mani", "name": "Manikűr / Manicure", "duration": 45, "price": 6500, "color": "bright_magenta"},
    {"id": "n_gel", "name": "Gél lakk / Gel Polish", "duration": 60, "price": 8000, "color": "magenta"},
    {"id": "n_build", "name": "Műköröm építés / Nail Extensions", "duration": 120, "price": 14000, "color": "red"},
    {"id": "n_fill", "name": "Töltés / Refill", "duration": 90, "price": 10000, "color": "bright_red"},
    {"id": "n_pedi", "name": "Pedikűr / Pedicure", "duration": 60, "price": 8500, "color": "cyan"},
]

SERVICES_COSMETICS = [
    {"id": "c_facial", "name": "Arckezelés / Facial", "duration": 60, "price": 12000, "color": "green"},
    {"id": "c_deep", "name": "Mélytisztítás / Deep Cleansing", "duration": 90, "price": 15000, "color": "bright_green"},
    {"id": "c_brow", "name": "Szemöldök formázás / Brow Shaping", "duration": 20, "price": 3000, "color": "yellow"},
    {"id": "c_lash", "name": "Szempilla lifting / Lash Lift", "duration": 60, "price": 11000, "color": "bright_yellow"},
    {"id": "c_wax", "name": "Gyantázás / Waxing", "duration": 30, "price": 5000, "color": "cyan"},
]
