RESTRICTED_COUNTRIES = ("China", "Vietnam", "India", "Irán", "Iran")

_RESTRICTED_KEYS = frozenset(country.casefold() for country in RESTRICTED_COUNTRIES)


def country_key(country: str | None) -> str:
    return (country or "").casefold()


def is_restricted_country(country: str | None) -> bool:
    return country_key(country) in _RESTRICTED_KEYS
