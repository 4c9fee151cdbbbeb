"""Map TVRage XML feed responses onto the client's models."""

import re
import xml.etree.ElementTree as ET
from logging import getLogger
from typing import List, Optional

from .exceptions import ParseError
from .models import CountryDetail, Episode, EpisodeList, ShowInfo, clean_text

logger = getLogger(__name__)

EPISODE_NUMBER_PATTERN = re.compile(r'^\s*(\d+)x(\d+)\s*$', re.IGNORECASE)


def _parse_document(xml_text: str) -> ET.Element:
    """Parse the raw response and return its root element."""
    if xml_text is None:
        raise ParseError("Empty response", raw_text="")
    try:
        return ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ParseError(f"Malformed XML: {e}", raw_text=xml_text) from e


def _text(element: ET.Element, *tags: str) -> str:
    """Return the text of the first child found among tags, "" if none has a value."""
    for tag in tags:
        child = element.find(tag)
        if child is not None:
            return clean_text(child.text)
    return ""


def _int(value: Optional[str], default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _required_int(value: Optional[str], name: str, xml_text: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ParseError(f"Missing or non-numeric {name}: {value!r}", raw_text=xml_text) from None


def _country_details(elements: List[ET.Element]) -> List[CountryDetail]:
    details = []
    for element in elements:
        detail = clean_text(element.text)
        if detail:
            details.append(CountryDetail(country=clean_text(element.get('country')), detail=detail))
    return details


def _parse_show(element: ET.Element, xml_text: str) -> ShowInfo:
    """Build a ShowInfo from a <Showinfo> or search <show> record."""
    show_id = _required_int(_text(element, 'showid'), 'showid', xml_text)

    return ShowInfo(
        show_id=show_id,
        show_name=_text(element, 'showname', 'name'),
        show_link=_text(element, 'showlink', 'link'),
        country=_text(element, 'origin_country', 'country'),
        started=_text(element, 'started'),
        start_date=_text(element, 'startdate'),
        ended=_text(element, 'ended'),
        status=_text(element, 'status'),
        classification=_text(element, 'classification'),
        runtime=_text(element, 'runtime'),
        air_time=_text(element, 'airtime'),
        air_day=_text(element, 'airday'),
        timezone=_text(element, 'timezone'),
        total_seasons=_int(_text(element, 'seasons')),
        genres=[genre for genre in (clean_text(g.text) for g in element.findall('genres/genre')) if genre],
        networks=_country_details(element.findall('network')),
        akas=_country_details(element.findall('akas/aka')),
    )


def parse_show_info(xml_text: str) -> List[ShowInfo]:
    """Parse a showinfo feed.

    The feed normally has a single <Showinfo> root; an empty root means the
    show was not found. Documents holding <show> records are accepted too.

    Args:
        xml_text: Raw response body

    Returns:
        The show records in document order (possibly empty)

    Raises:
        ParseError: The XML is malformed or a record has no numeric showid
    """
    root = _parse_document(xml_text)

    if root.tag.lower() == 'showinfo':
        records = [root] if len(root) else []
    else:
        records = root.findall('show')

    shows = [_parse_show(record, xml_text) for record in records]
    logger.debug(f"Parsed {len(shows)} show record(s) from showinfo feed.")
    return shows


def parse_search_results(xml_text: str) -> List[ShowInfo]:
    """Parse a search feed into the list of matching shows, [] if there are none."""
    root = _parse_document(xml_text)
    shows = [_parse_show(record, xml_text) for record in root.findall('show')]
    logger.debug(f"Parsed {len(shows)} search result(s).")
    return shows


def parse_episode_list(xml_text: str) -> EpisodeList:
    """Parse an episode_list feed.

    Episodes are flattened from their <Season no="N"> groups in the order the
    service lists them. Nothing is re-sorted.

    Args:
        xml_text: Raw response body

    Returns:
        The EpisodeList; empty when the document has no <Episodelist>

    Raises:
        ParseError: The XML is malformed, a season has no numeric "no" attribute
            or an episode has no numeric <seasonnum>
    """
    root = _parse_document(xml_text)

    show_name = _text(root, 'name')
    episode_list = EpisodeList(
        show_name=show_name,
        total_seasons=_int(_text(root, 'totalseasons')),
    )

    groups = root.find('Episodelist')
    if groups is None:
        logger.debug(f"No Episodelist element in episode_list feed for '{show_name}'.")
        return episode_list

    for season_element in groups.findall('Season'):
        season = _required_int(season_element.get('no'), 'season number', xml_text)
        for episode_element in season_element.findall('episode'):
            episode_list.episodes.append(Episode(
                show_name=show_name,
                season=season,
                episode=_required_int(_text(episode_element, 'seasonnum'), 'seasonnum', xml_text),
                absolute_number=_int(_text(episode_element, 'epnum')),
                production_id=_text(episode_element, 'prodnum'),
                air_date=_text(episode_element, 'airdate'),
                link=_text(episode_element, 'link'),
                title=_text(episode_element, 'title'),
                summary=_text(episode_element, 'summary'),
                rating=_text(episode_element, 'rating'),
                screen_cap=_text(episode_element, 'screencap'),
            ))

    logger.debug(f"Parsed {len(episode_list)} episode(s) for '{show_name}'.")
    return episode_list


def parse_episode_info(xml_text: str) -> Episode:
    """Parse an episodeinfo feed into a single Episode.

    Raises:
        ParseError: The XML is malformed, has no <episode> element, or the
            episode <number> is not of the form SSxEE
    """
    root = _parse_document(xml_text)

    episode_element = root.find('episode')
    if episode_element is None:
        raise ParseError("No episode element in episodeinfo response", raw_text=xml_text)

    number = _text(episode_element, 'number')
    match = EPISODE_NUMBER_PATTERN.match(number)
    if not match:
        raise ParseError(f"Invalid episode number: {number!r}", raw_text=xml_text)

    return Episode(
        show_id=_int(root.get('id')),
        show_name=_text(root, 'name'),
        season=int(match.group(1)),
        episode=int(match.group(2)),
        title=_text(episode_element, 'title'),
        air_date=_text(episode_element, 'airdate'),
        link=_text(episode_element, 'url', 'link'),
        production_id=_text(episode_element, 'prodnum'),
        summary=_text(episode_element, 'summary'),
        rating=_text(episode_element, 'rating'),
        screen_cap=_text(episode_element, 'screencap'),
    )
