"""Story Pydantic schemas.

The API uses PascalCase for request fields and camelCase for response
fields. Models expose snake_case attributes and carry the wire names as
aliases.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StoryRequest(BaseModel):
    """Create/edit payload for a story.

    Empty strings are accepted so the API's own validation can be tested.

    Attributes:
        title: Story title (wire name ``Title``).
        description: Spoiler text (wire name ``Description``).
    """

    title: str = Field(..., alias="Title", description="Story title")
    description: str = Field(..., alias="Description", description="Spoiler text")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"Title": "New Story", "Description": "This is a spoiler"}
        },
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire names for the JSON request body."""
        return self.model_dump(by_alias=True)


class StoryMessageResponse(BaseModel):
    """Message envelope returned by create/edit/delete.

    Attributes:
        story_id: Server-assigned identifier (wire name ``storyId``), only on create.
        msg: Outcome message.
    """

    story_id: str | None = Field(default=None, alias="storyId")
    msg: str | None = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiResponse:
    """HTTP outcome of a single API call.

    Attributes:
        status_code: HTTP status code.
        text: Raw response body.
        data: Parsed message envelope, or None when the body is not a JSON object.
    """

    status_code: int
    text: str
    data: StoryMessageResponse | None = None

    @property
    def msg(self) -> str | None:
        """Outcome message, if the body carried one."""
        return self.data.msg if self.data else None

    @property
    def story_id(self) -> str | None:
        """Created story identifier, if the body carried one."""
        return self.data.story_id if self.data else None
