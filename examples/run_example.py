"""
Build the worked example selectors and print them.
"""

import logging

from dotenv import load_dotenv

from utils.io import from_json, to_json
from utils.logging_config import configure_logging
from utils.objects import Rectangle
from web_selectors import css_selector_builder as builder

load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)


def run_example():
    simple = builder.id("main").class_("container").class_("editable")
    link = builder.element("a").attr('href$=".png"').pseudo_class("focus")
    nested = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    for selector in (simple, link, nested):
        logger.info("%s (specificity %s)", selector.stringify(), selector.specificity())

    rect = from_json(Rectangle, to_json({"width": 10, "height": 20}))
    logger.info("Restored %s with area %s", rect, rect.get_area())


if __name__ == "__main__":
    run_example()
