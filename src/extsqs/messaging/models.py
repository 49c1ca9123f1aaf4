"""Send results, resolutions, and the inline/overflow body variant."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel


class InlineBody(BaseModel):
    """The message body travels in the queue message itself."""

    model_config = {"frozen": True}

    body: str


class OverflowPointer(BaseModel):
    """The message body lives in the object store at bucket/key."""

    model_config = {"frozen": True}

    bucket: str
    key: str


BodyLocation = Union[InlineBody, OverflowPointer]


class SendResult(BaseModel):
    """Outcome of an extended send."""

    response: dict[str, Any]
    extended: bool = False
    bucket: Optional[str] = None
    key: Optional[str] = None


class Resolution(BaseModel):
    """Outcome of decoding one received message: a body or an error."""

    model_config = {"arbitrary_types_allowed": True}

    message: dict[str, Any]
    body: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None
