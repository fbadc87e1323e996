from __future__ import annotations

from collections.abc import Iterator

import pytest

from mollie_sms.message import Message
from mollie_sms.settings import SmsSettings, get_settings

SUCCESS_BODY = """<?xml version="1.0" ?>
<response>
    <item type="sms">
        <recipients>1</recipients>
        <success>true</success>
        <resultcode>10</resultcode>
        <resultmessage>Message successfully sent.</resultmessage>
    </item>
</response>
"""

FAILURE_BODY = """<?xml version="1.0" ?>
<response>
    <item type="sms">
        <recipients>0</recipients>
        <success>false</success>
        <resultcode>20</resultcode>
        <resultmessage>No username given.</resultmessage>
    </item>
</response>
"""

RECIPIENT = "+31612345678"
BODY = "The stars tell me you will have chicken noodle soup for breakfast."


@pytest.fixture
def settings() -> SmsSettings:
    return SmsSettings(
        username="AstroRadio",
        password="secret",
        originator="Astro INC",
    )


@pytest.fixture
def message(settings: SmsSettings) -> Message:
    return Message(RECIPIENT, BODY, settings=settings)


@pytest.fixture
def clean_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
