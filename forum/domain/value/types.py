"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import UserId


class ThreadCategory(str, Enum):
    """Fixed set of forum sections a thread is filed under."""

    SOFTWARE_DEVELOPMENT = "Software Development"
    NETWORKING_AND_SECURITY = "Networking & Security"
    HARDWARE_AND_GADGETS = "Hardware & Gadgets"
    CLOUD_COMPUTING = "Cloud Computing"
    TECH_NEWS_AND_TRENDS = "Tech News & Trends"


class ThreadStatus(str, Enum):
    """Thread status.

    Every thread starts as NEW. Nothing promotes a thread to HOT yet; the
    value is accepted so stored documents carrying it still load.
    """

    NEW = "New"
    HOT = "Hot"


class TagType(str, Enum):
    """Closed set of topics a thread can be tagged with."""

    WEB_DEVELOPMENT = "WEB DEVELOPMENT"
    MOBILE_DEVELOPMENT = "MOBILE DEVELOPMENT"
    DATA_SCIENCE = "DATA SCIENCE"
    MACHINE_LEARNING = "MACHINE LEARNING"
    DEVOPS = "DEVOPS"
    UI_UX_DESIGN = "UI/UX DESIGN"
    CYBERSECURITY = "CYBERSECURITY"
    CLOUD_COMPUTING = "CLOUD COMPUTING"
    GAME_DEVELOPMENT = "GAME DEVELOPMENT"
    DATABASES = "DATABASES"


class ThreadTag(ValueObject):
    """A tag attached to one thread.

    Tags are embedded per thread rather than normalized, so the same
    tag type appears as a separate value in every thread that uses it.
    """

    thread_tag_id: str = Field(min_length=1, max_length=64)
    tag_type: TagType


class CreatorRef(ValueObject):
    """Snapshot of a user's display data taken when content is written."""

    id: UserId
    username: str
    name: str = ""
    email: Optional[str] = None
