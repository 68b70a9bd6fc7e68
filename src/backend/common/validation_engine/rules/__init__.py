from .choice import OneOf
from .dates import CalendarDate, IsoDateFormat, YearAfterUntilToday
from .text import (
    DigitsOnly,
    Email,
    ExactLength,
    LettersAndSpaces,
    MaxLength,
    MinLength,
    Pattern,
    Required,
)

__all__ = [
    "Required",
    "ExactLength",
    "MinLength",
    "MaxLength",
    "Pattern",
    "DigitsOnly",
    "Email",
    "LettersAndSpaces",
    "IsoDateFormat",
    "CalendarDate",
    "YearAfterUntilToday",
    "OneOf",
]
