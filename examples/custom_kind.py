from enum import Enum

from argkit import OptionSet, Value, classify, usage_error
from argkit.command import usage


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"

    def __str__(self):
        return self.value


class PlaceValue(Value):
    kind = "place"
    hint_text = f"one of: {', '.join(place.name.lower() for place in Place)}"

    def parse(self, text: str) -> Place:
        try:
            return Place[text.upper()]
        except KeyError:
            raise ValueError(f"unknown place {text!r}") from None

    def render(self) -> str:
        return self.value.name.lower() if self.value else ""


options = OptionSet()
place = options.add_value("place", PlaceValue(Place.NEW_YORK), "Where to deploy.")
options.add_bool("verbose", False, "Log more.")

if __name__ == "__main__":
    print(usage(options, program="custom_kind"))
    options.parse(["-place", "london"])
    print(f"\nParsed place: {place.value}")
    try:
        options.parse(["-place", "paris"])
    except Exception as error:
        message, code = classify(usage_error(error))
        print(f"\n{message} (exit code {code})")
