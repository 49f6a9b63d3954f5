"""Text rendering of a resolved menu."""

from collections.abc import Iterable, Sequence
from textwrap import fill, indent

from rich.text import Text

from mensar.models import LineElement, Meal

DESCRIPTION_WIDTH = 40
MEAL_INDENT = "    "
PRICE_INDENT = "\t\t\t\t"
PRICE_SEPARATOR = " / "


def format_prices(meal: Meal) -> str:
    """Join all price tiers in published order, e.g. "8.5 / 12.0"."""
    return PRICE_SEPARATOR.join(str(tier.price) for tier in meal.meal_price_array)


def wrap_description(description: str) -> str:
    """Wrap each line of the description at 40 columns, keeping its line breaks."""
    return "\n".join(fill(part, DESCRIPTION_WIDTH) for part in description.splitlines())


def render_menu(lines: Sequence[LineElement], show_prices: bool = False) -> Text:
    """Render line elements as styled text.

    Station names are bold. A station with a meal is followed by the meal
    name and its description (wrapped at 40 columns), both indented, and
    optionally a line with the price tiers. ``Text.plain`` gives the
    unstyled output.
    """
    text = Text()
    for line in lines:
        text.append(line.name, style="bold")
        text.append("\n")
        meal = line.meal
        if meal is None:
            continue
        text.append(indent(meal.name, MEAL_INDENT) + "\n")
        text.append(indent(wrap_description(meal.description), MEAL_INDENT) + "\n")
        if show_prices:
            text.append(indent(format_prices(meal), PRICE_INDENT) + "\n")
    return text


def render_facility_list(names: Iterable[str]) -> str:
    return "".join(f"{name}\n" for name in names)
