from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.locale import EN_EU, EN_IN, EN_US


AED = Currency("AED", "784", "United Arab Emirates Dirham", "د.إ", 2, symbol_first=False, default_locale=EN_US)
BHD = Currency("BHD", "048", "Bahraini Dinar", "ب.د", 3, symbol_first=True, default_locale=EN_US)
EUR = Currency("EUR", "978", "Euro", "€", 2, symbol_first=True, default_locale=EN_EU)
GBP = Currency("GBP", "826", "British Pound", "£", 2, symbol_first=True, default_locale=EN_US)
INR = Currency("INR", "356", "Indian Rupee", "₹", 2, symbol_first=True, default_locale=EN_IN)
USD = Currency("USD", "840", "United States Dollar", "$", 2, symbol_first=True, default_locale=EN_US)

# Register all predefined currencies
Currency.register(AED, overwrite=True)
Currency.register(BHD, overwrite=True)
Currency.register(EUR, overwrite=True)
Currency.register(GBP, overwrite=True)
Currency.register(INR, overwrite=True)
Currency.register(USD, overwrite=True)
