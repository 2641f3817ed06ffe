"""Race card text parser.

This module turns raw race card text (a PDF text layer or recognised image
text) into HorseRecord objects. The input has no reliable structure, so lines
are classified by a simple convention:

- a line starting with a digit is a runner's header line
  (``"<draw> <name...> <weight>kg"``)
- following lines belong to that runner until the next header line
- the second line of a runner is its form-figures line
- the last token of a runner's last line is its age

Fields that cannot be read fall back to defaults instead of failing the
whole record.
"""

import logging

from racecard.constants import VERDICT_MARKER, WEIGHT_UNIT_SUFFIX
from racecard.models.horse import HorseRecord
from racecard.parsers.form_figures import parse_form_figures
from racecard.utils.number_parser import (
    parse_non_negative_float,
    parse_non_negative_int,
)

logger = logging.getLogger(__name__)


class RaceCardParser:
    """Parser for race card text.

    The parser is stateless; every call to parse() returns a new list of
    immutable records.

    Example:
        >>> parser = RaceCardParser()
        >>> horses = parser.parse("3 Thunder Bolt 61.5kg")
        >>> horses[0].name
        'Thunder Bolt'
        >>> horses[0].current_weight
        61.5
    """

    def parse(self, raw_text: str) -> list[HorseRecord]:
        """Parse race card text into horse records.

        Args:
            raw_text: The raw text block.

        Returns:
            List of HorseRecord in source order. Empty if no header line
            was found.
        """
        groups = self._group_lines(raw_text)
        horses = [self._parse_group(lines) for lines in groups]
        logger.debug("Parsed %d horse records", len(horses))
        return horses

    def _group_lines(self, raw_text: str) -> list[list[str]]:
        """Split text into per-runner line groups.

        Args:
            raw_text: The raw text block.

        Returns:
            List of line groups, each starting with a header line.
        """
        groups: list[list[str]] = []
        current: list[str] | None = None

        for line in raw_text.splitlines():
            if not line.strip() or VERDICT_MARKER in line:
                continue

            if is_header_line(line):
                current = [line]
                groups.append(current)
            elif current is not None:
                current.append(line)
            else:
                logger.debug("Skipping line before first header: %r", line)

        return groups

    def _parse_group(self, lines: list[str]) -> HorseRecord:
        """Build a HorseRecord from one line group.

        Args:
            lines: Line group, the first line being the header line.

        Returns:
            HorseRecord (best effort, never None).
        """
        header = lines[0]
        weight = parse_header_weight(header)

        prior_results = ()
        if len(lines) > 1:
            prior_results = parse_form_figures(lines[1])

        return HorseRecord(
            name=extract_horse_name(header),
            age=parse_age(lines[-1]),
            current_weight=weight,
            # 前走斤量の出典がないため今回斤量と同じ値を入れる
            prior_weight=weight,
            prior_results=prior_results,
        )


def is_header_line(line: str) -> bool:
    """Return True if the line starts a new runner.

    Only decimal digits count. Other numeric characters such as "½" or
    "Ⅻ" are deliberately not treated as a draw number, since they show up
    in OCR noise far more often than as the start of a runner.

    Args:
        line: A line of race card text.

    Returns:
        True if the first non-blank character is a digit.
    """
    stripped = line.strip()
    return bool(stripped) and stripped[0].isdigit()


def extract_horse_name(header_line: str) -> str:
    """Extract the display name from a header line.

    The first token is the draw and is dropped. A trailing weight field is
    not part of the name.

    Args:
        header_line: The runner's header line (e.g., "3 Thunder Bolt 61.5kg").

    Returns:
        The horse name (e.g., "Thunder Bolt"), empty if the line has a
        single token.
    """
    name_tokens = header_line.split()[1:]
    if name_tokens and parse_weight_token(name_tokens[-1]) is not None:
        name_tokens = name_tokens[:-1]
    return " ".join(name_tokens)


def parse_weight_token(token: str) -> float | None:
    """Parse a weight token such as "61.5kg".

    Args:
        token: The weight token.

    Returns:
        The weight in kg, or None if the token is not a weight.
    """
    return parse_non_negative_float(token.removesuffix(WEIGHT_UNIT_SUFFIX))


def parse_header_weight(header_line: str) -> float:
    """Parse the carried weight from the last token of a header line.

    Args:
        header_line: The runner's header line.

    Returns:
        The weight in kg, 0.0 if it cannot be read.
    """
    tokens = header_line.split()
    weight = parse_weight_token(tokens[-1]) if tokens else None
    if weight is None:
        logger.debug("Unreadable weight in header line %r", header_line)
        return 0.0
    return weight


def parse_age(line: str) -> int:
    """Parse the age from the last token of a line.

    Args:
        line: The last line of a runner's group.

    Returns:
        The age, 0 if it cannot be read.
    """
    tokens = line.split()
    age = parse_non_negative_int(tokens[-1]) if tokens else None
    if age is None:
        logger.debug("Unreadable age in line %r", line)
        return 0
    return age


def parse_race_card(raw_text: str) -> list[HorseRecord]:
    """Parse race card text into horse records.

    Shortcut for RaceCardParser().parse().

    Args:
        raw_text: The raw text block.

    Returns:
        List of HorseRecord in source order.
    """
    return RaceCardParser().parse(raw_text)
