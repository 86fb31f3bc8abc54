"""Sample menu showing required vs. optional pizza data.

Builds the sample pizzas, derives their descriptions, and renders them to a
rich console as plain text or JSON.
"""

import logging
from typing import List, Optional, Tuple

from pydantic import ValidationError
from rich.console import Console

from src.models.models import Cheese, CheeseCatalog, Pizza, Topping
from src.utils.config import config
from src.utils.logger import logger


def make_pizza(name: Optional[str], toppings: List[Topping], cheeses: Optional[List[Cheese]] = None) -> Pizza:
    """Build a menu pizza, reporting when its cheeses fall back to the default.

    The report is logged at INFO when DEFAULT_CHEESE_WARNING is set, else DEBUG.
    """
    pizza = Pizza(toppings=toppings, cheeses=cheeses)
    if cheeses is None:
        level = logging.INFO if config.DEFAULT_CHEESE_WARNING else logging.DEBUG
        defaulted = ", ".join(cheese.name for cheese in pizza.cheeses)
        logger.log(
            level,
            f"No cheeses provided, defaulting to standard cheese ({defaulted})",
            extra={"pizza_name": name or "unnamed"},
        )
    return pizza


def build_sample_pizzas() -> List[Tuple[Optional[str], Pizza]]:
    """Return (name, pizza) pairs for the sample menu.

    The last pizza has no name and passes ``cheeses=None`` explicitly, which
    the model allows and replaces with the standard cheese.
    """
    cheese_pizza = make_pizza("Cheese Pizza", toppings=[])

    meat_lovers = make_pizza(
        "Meat Lovers' Pizza",
        toppings=[Topping.HAM, Topping.MEATBALL, Topping.PEPPERONI, Topping.SAUSAGE, Topping.BACON],
        cheeses=[CheeseCatalog.standard(), CheeseCatalog.parmesan()],
    )

    hawaiian = make_pizza(None, toppings=[Topping.HAM, Topping.PINEAPPLE], cheeses=None)

    return [
        ("Cheese Pizza", cheese_pizza),
        ("Meat Lovers' Pizza", meat_lovers),
        (None, hawaiian),
    ]


def describe_menu(pizzas: List[Tuple[Optional[str], Pizza]]) -> List[str]:
    """Describe each pizza in menu order."""
    descriptions = []
    for name, pizza in pizzas:
        logger.debug("Describing pizza", extra={"pizza_name": name or "unnamed"})
        descriptions.append(pizza.get_description(name))
    return descriptions


def cheese_analysis(cheese: Cheese) -> List[str]:
    """Answer "what is this cheese made from?" for a single cheese.

    Args:
        cheese: Cheese to analyse.

    Returns:
        Question line, animal type line, and the cheese's description.
    """
    return [
        f"What is {cheese.display_name} cheese made from?",
        f"Animal type: {cheese.origin_text()}.",
        cheese.describe(),
    ]


def check_missing_toppings() -> Optional[str]:
    """Try to build a pizza without toppings and report what went wrong.

    Returns:
        The validation error message, or None if construction unexpectedly succeeded.
    """
    try:
        Pizza(toppings=None)
    except ValidationError as e:
        logger.warning(f"Pizza rejected without toppings: {e.errors()[0]['msg']}")
        return str(e)
    return None


def _analysis_cheese() -> Cheese:
    if config.ANALYSIS_CHEESE == "parmesan":
        return CheeseCatalog.parmesan()
    return CheeseCatalog.standard()


def render(console: Console, output_format: Optional[str] = None, show_missing_toppings: bool = False) -> None:
    """Print the sample menu.

    Args:
        console: Rich console to print to.
        output_format: "text" or "json". Defaults to config.OUTPUT_FORMAT.
        show_missing_toppings: Also print the result of check_missing_toppings().

    Raises:
        ValueError: If output_format is not "text" or "json".
    """
    output_format = (output_format or config.OUTPUT_FORMAT).lower()
    if output_format not in ("text", "json"):
        raise ValueError(f"output_format must be 'text' or 'json', got: {output_format}")

    pizzas = build_sample_pizzas()
    logger.info(f"Rendering {len(pizzas)} pizzas as {output_format}")

    if output_format == "json":
        console.print_json(
            data=[
                {
                    "name": name,
                    "description": pizza.get_description(name),
                    "pizza": pizza.model_dump(mode="json"),
                }
                for name, pizza in pizzas
            ]
        )
    else:
        console.print("[bold]Pizza descriptions[/bold]")
        console.print()
        for line in describe_menu(pizzas):
            console.print(line, markup=False)

    if show_missing_toppings:
        console.print()
        error = check_missing_toppings()
        if error:
            console.print("[yellow]Pizza without toppings was rejected:[/yellow]")
            console.print(error, markup=False)

    if config.SHOW_CHEESE_ANALYSIS:
        console.print()
        for line in cheese_analysis(_analysis_cheese()):
            console.print(line, markup=False)
