from __future__ import annotations

from datetime import datetime, timezone

import pytest

from models.data import Data
from models.environment import Environment
from models.location import Location
from models.unit import Unit

MINIMAL_EEML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<eeml xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns="http://www.eeml.org/xsd/005" '
    'xsi:schemaLocation="http://www.eeml.org/xsd/005 http://www.eeml.org/xsd/005/005.xsd">'
    '<environment><data id="0"><value>36.2</value></data></environment></eeml>'
)

COMPLETE_EEML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<eeml version="5" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns="http://www.eeml.org/xsd/005" '
    'xsi:schemaLocation="http://www.eeml.org/xsd/005 http://www.eeml.org/xsd/005/005.xsd">'
    '<environment updated="2007-05-04T18:13:51Z" creator="http://www.haque.co.uk" id="1">'
    "<title>A Room Somewhere</title>"
    "<feed>http://www.pachube.com/feeds/1.xml</feed>"
    "<status>frozen</status>"
    "<description>This is a room somewhere</description>"
    "<icon>http://www.roomsomewhere/icon.png</icon>"
    "<website>http://www.roomsomewhere/</website>"
    "<email>myemail@roomsomewhere</email>"
    '<location domain="physical" exposure="indoor" disposition="fixed">'
    "<name>My Room</name><lat>32.4</lat><lon>22.7</lon><ele>0.2</ele></location>"
    '<data id="0"><tag>temperature</tag><value maxValue="48.0" minValue="23.0">36.2</value>'
    '<unit type="derivedSI" symbol="C">Celsius</unit></data>'
    '<data id="1"><tag>blush</tag><tag>redness</tag><tag>embarrassment</tag>'
    '<value maxValue="100.0" minValue="0.0">84.0</value>'
    '<unit type="contextDependentUnits">blushesPerHour</unit></data>'
    '<data id="2"><tag>length</tag><tag>distance</tag><tag>extension</tag>'
    '<value minValue="0.0">12.3</value><unit type="basicSI" symbol="m">meter</unit></data>'
    "</environment></eeml>"
)


@pytest.fixture()
def complete_environment() -> Environment:
    env = Environment()
    env.title = "A Room Somewhere"
    env.feed = "http://www.pachube.com/feeds/1.xml"
    env.status = "frozen"
    env.description = "This is a room somewhere"
    env.icon = "http://www.roomsomewhere/icon.png"
    env.website = "http://www.roomsomewhere/"
    env.email = "myemail@roomsomewhere"
    env.updated_at = datetime(2007, 5, 4, 18, 13, 51, tzinfo=timezone.utc)
    env.creator = "http://www.haque.co.uk"
    env.id = 1
    env.location = Location(
        "physical",
        exposure="indoor",
        disposition="fixed",
        name="My Room",
        lat=32.4,
        lon=22.7,
        ele=0.2,
    )

    temperature = Data(36.2)
    temperature.tags.append("temperature")
    temperature.max_value = 48.0
    temperature.min_value = 23.0
    temperature.unit = Unit("Celsius", symbol="C", type="derivedSI")
    env.append(temperature)

    blush = Data(84.0)
    blush.tags.extend(["blush", "redness", "embarrassment"])
    blush.max_value = 100.0
    blush.min_value = 0.0
    blush.unit = Unit("blushesPerHour", type="contextDependentUnits")
    env.append(blush)

    length = Data(12.3)
    length.tags.extend(["length", "distance", "extension"])
    length.min_value = 0.0
    length.unit = Unit("meter", symbol="m", type="basicSI")
    env.append(length)

    return env


@pytest.fixture()
def minimal_eeml() -> str:
    return MINIMAL_EEML


@pytest.fixture()
def complete_eeml() -> str:
    return COMPLETE_EEML
