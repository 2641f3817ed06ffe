"""Form figures parser.

A form-figures line is a whitespace separated list of past runs such as
``"1Gd 3Sft 2Gd"``. Each token carries a finishing position (digits) and a
ground code (letters).
"""

import logging
import re

from racecard.models.horse import PriorResult
from racecard.utils.number_parser import parse_non_negative_int

logger = logging.getLogger(__name__)

# Leading or trailing run of letters (any script, no digits or underscore)
_EDGE_LETTERS = re.compile(r"^[^\W\d_]+|[^\W\d_]+$")


def parse_form_figures(line: str) -> tuple[PriorResult, ...]:
    """Parse a form-figures line into prior results.

    Every token yields one PriorResult, even when it cannot be read; an
    unreadable position becomes 0 and a token without letters gets an empty
    ground code.

    Args:
        line: The form-figures line.

    Returns:
        Tuple of PriorResult in source order.
    """
    return tuple(parse_form_token(token) for token in line.split())


def parse_form_token(token: str) -> PriorResult:
    """Parse a single form token.

    Args:
        token: A token such as "3Gd" or "Sft1".

    Returns:
        PriorResult for the token.

    Example:
        >>> parse_form_token("3Gd")
        PriorResult(finish_position=3, ground_code='Gd')
    """
    position = parse_non_negative_int(_EDGE_LETTERS.sub("", token))
    if position is None:
        logger.debug("Unreadable finish position in form token %r", token)
        position = 0

    ground_code = "".join(ch for ch in token if ch.isalpha())
    return PriorResult(finish_position=position, ground_code=ground_code)
