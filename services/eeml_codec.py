"""Conversion between :class:`Environment` graphs and EEML 005 documents."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Union
from xml.sax.saxutils import escape

from lxml import etree

from models.data import Data
from models.environment import Environment
from models.errors import EEMLParseError, NoDataError, ValidationError
from models.location import Location
from models.unit import Unit

logger = logging.getLogger(__name__)

EEML_NAMESPACE = "http://www.eeml.org/xsd/005"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = f"{EEML_NAMESPACE} {EEML_NAMESPACE}/005.xsd"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_ESCAPES = {'"': "&quot;", "'": "&apos;"}


def serialize(environment: Environment, version: Optional[Union[str, int]] = None) -> str:
    """Render ``environment`` as a single-line EEML document.

    Data items without an explicit id are numbered by their position at the
    time of the call. The environment itself is not modified.
    """
    if len(environment) == 0:
        raise NoDataError()

    try:
        element = _build_environment(environment)
    except ValidationError:
        raise
    except ValueError as exc:
        raise ValidationError(f"Cannot serialize environment: {exc}") from exc
    document = f"{XML_DECLARATION}{_root_open_tag(version)}{_render(element)}</eeml>"
    logger.debug(
        "Serialized environment",
        extra={
            "environment_id": environment.id,
            "data_count": len(environment),
            "version": version,
        },
    )
    return document


def parse(text: Union[str, bytes]) -> Environment:
    """Build an :class:`Environment` from EEML document text.

    Elements are matched by local name, so namespace prefixes and the order
    of the root's namespace declarations do not matter. Ids are kept as the
    literal attribute strings.
    """
    root = _read_root(text)
    try:
        environment = _parse_environment(root)
    except ValidationError as exc:
        raise _parse_error(str(exc)) from exc
    logger.debug(
        "Parsed environment",
        extra={"environment_id": environment.id, "data_count": len(environment)},
    )
    return environment


def format_number(value: float) -> str:
    """Decimal text with at least one fractional digit (``48`` -> ``48.0``).

    Exponent forms keep a fractional mantissa: ``1e16`` -> ``1.0e+16``.
    """
    text = repr(float(value))
    mantissa, marker, exponent = text.partition("e")
    if marker and "." not in mantissa:
        return f"{mantissa}.0e{exponent}"
    return text


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    candidate = value.strip()
    if not candidate:
        raise ValueError("Timestamp is empty.")

    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise ValueError("Invalid timestamp format") from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed.astimezone(timezone.utc)


def _root_open_tag(version: Optional[Union[str, int]]) -> str:
    attributes: List[str] = []
    if version is not None:
        attributes.append(f'version="{_escape(str(version))}"')
    attributes.extend(
        [
            f'xmlns:xsi="{XSI_NAMESPACE}"',
            f'xmlns="{EEML_NAMESPACE}"',
            f'xsi:schemaLocation="{SCHEMA_LOCATION}"',
        ]
    )
    return f"<eeml {' '.join(attributes)}>"


def _build_environment(environment: Environment) -> etree._Element:
    element = etree.Element("environment")
    if environment.updated_at is not None:
        element.set("updated", format_timestamp(environment.updated_at))
    if environment.creator is not None:
        element.set("creator", str(environment.creator))
    if environment.id is not None:
        element.set("id", str(environment.id))

    _add_text(element, "title", environment.title)
    _add_text(element, "feed", environment.feed)
    if environment.status is not None:
        _add_text(element, "status", environment.status.value)
    _add_text(element, "description", environment.description)
    _add_text(element, "icon", environment.icon)
    _add_text(element, "website", environment.website)
    _add_text(element, "email", environment.email)

    if environment.location is not None:
        _build_location(element, environment.location)

    for index, data in enumerate(environment):
        _build_data(element, data, index)

    return element


def _build_location(parent: etree._Element, location: Location) -> None:
    element = etree.SubElement(parent, "location")
    element.set("domain", location.domain.value)
    if location.exposure is not None:
        element.set("exposure", str(location.exposure))
    if location.disposition is not None:
        element.set("disposition", str(location.disposition))

    _add_text(element, "name", location.name)
    for name in ("lat", "lon", "ele"):
        coordinate = getattr(location, name)
        if coordinate is not None:
            _add_text(element, name, format_number(coordinate))


def _build_data(parent: etree._Element, data: Data, index: int) -> None:
    element = etree.SubElement(parent, "data")
    element.set("id", str(data.id) if data.id is not None else str(index))

    for tag in data.tags:
        if tag is None:
            raise ValidationError(f"data item {index} has a tag of None")
        _add_text(element, "tag", tag)

    value = etree.SubElement(element, "value")
    if data.max_value is not None:
        value.set("maxValue", format_number(data.max_value))
    if data.min_value is not None:
        value.set("minValue", format_number(data.min_value))
    value.text = format_number(data.value)

    if data.unit is not None:
        unit = etree.SubElement(element, "unit")
        if data.unit.type is not None:
            unit.set("type", str(data.unit.type))
        if data.unit.symbol is not None:
            unit.set("symbol", str(data.unit.symbol))
        unit.text = data.unit.name


def _add_text(parent: etree._Element, name: str, text: Optional[str]) -> None:
    if text is None:
        return
    child = etree.SubElement(parent, name)
    child.text = str(text)


def _escape(value: str) -> str:
    return escape(value, _ESCAPES)


def _render(element: etree._Element) -> str:
    # Text and attribute values carry all five predefined entities.
    attributes = "".join(
        f' {name}="{_escape(value)}"' for name, value in element.attrib.items()
    )
    content = _escape(element.text) if element.text else ""
    content += "".join(_render(child) for child in element)
    return f"<{element.tag}{attributes}>{content}</{element.tag}>"


def _read_root(text: Union[str, bytes]) -> etree._Element:
    payload = text.encode("utf-8") if isinstance(text, str) else text
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        root = etree.fromstring(payload, parser)
    except etree.XMLSyntaxError as exc:
        raise _parse_error(f"malformed XML: {exc}") from exc

    if _local_name(root) != "eeml":
        raise _parse_error(f"expected root element 'eeml', found {_local_name(root)!r}")
    return root


def _parse_environment(root: etree._Element) -> Environment:
    source = _child(root, "environment")
    if source is None:
        raise _parse_error("document has no environment element")

    environment = Environment()
    updated = source.get("updated")
    if updated is not None:
        try:
            environment.updated_at = parse_timestamp(updated)
        except ValueError as exc:
            raise _parse_error(f"invalid updated timestamp {updated!r}") from exc
    environment.creator = source.get("creator")
    environment.id = source.get("id")

    environment.title = _child_text(source, "title")
    environment.feed = _child_text(source, "feed")
    environment.status = _child_text(source, "status")
    environment.description = _child_text(source, "description")
    environment.icon = _child_text(source, "icon")
    environment.website = _child_text(source, "website")
    environment.email = _child_text(source, "email")

    location = _child(source, "location")
    if location is not None:
        environment.location = _parse_location(location)

    for index, element in enumerate(_children(source, "data")):
        environment.append(_parse_data(element, index))

    return environment


def _parse_location(element: etree._Element) -> Location:
    coordinates = {}
    for name in ("lat", "lon", "ele"):
        text = _child_text(element, name)
        if text is not None:
            coordinates[name] = _parse_float(text, f"location {name}")

    return Location(
        element.get("domain"),
        exposure=element.get("exposure"),
        disposition=element.get("disposition"),
        name=_child_text(element, "name"),
        **coordinates,
    )


def _parse_data(element: etree._Element, index: int) -> Data:
    value = _child(element, "value")
    if value is None:
        raise _parse_error(f"data item {index} has no value element")

    data = Data(_parse_float(value.text or "", "value"), id=element.get("id"))
    data.tags.extend(tag.text or "" for tag in _children(element, "tag"))

    max_value = value.get("maxValue")
    if max_value is not None:
        data.max_value = _parse_float(max_value, "maxValue")
    min_value = value.get("minValue")
    if min_value is not None:
        data.min_value = _parse_float(min_value, "minValue")

    unit = _child(element, "unit")
    if unit is not None:
        data.unit = Unit(unit.text or "", symbol=unit.get("symbol"), type=unit.get("type"))

    return data


def _parse_float(text: str, field: str) -> float:
    try:
        return float(text.strip())
    except ValueError as exc:
        raise _parse_error(f"invalid numeric {field} {text!r}") from exc


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _children(parent: etree._Element, name: str) -> List[etree._Element]:
    return [
        child
        for child in parent
        if isinstance(child.tag, str) and _local_name(child) == name
    ]


def _child(parent: etree._Element, name: str) -> Optional[etree._Element]:
    matches = _children(parent, name)
    return matches[0] if matches else None


def _child_text(parent: etree._Element, name: str) -> Optional[str]:
    child = _child(parent, name)
    if child is None:
        return None
    return child.text or ""


def _parse_error(reason: str) -> EEMLParseError:
    logger.warning("Rejected EEML document", extra={"reason": reason})
    return EEMLParseError(reason)
