"""Imgflip API models: templates, caption requests and their builders."""

from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, NonNegativeInt


class MemeTemplate(BaseModel):
    """Blank meme template that can be captioned with text boxes.

    Snapshot of the remote catalog; only ever built by decoding ``/get_memes``.
    Decoding is strict: numbers sent as strings or floats are rejected. ``url``
    is an ``HttpUrl``, so it is normalized (a bare host gains a trailing ``/``).
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str = Field(description="Template id, the template_id of /caption_image")
    name: str = Field(description="Human readable name such as 'Grumpy Cat'")
    url: HttpUrl = Field(description="URL of the blank template image")
    width: NonNegativeInt = Field(description="Width of the blank image in pixels")
    height: NonNegativeInt = Field(description="Height of the blank image in pixels")
    box_count: NonNegativeInt = Field(
        description="Number of caption boxes the template uses by default"
    )


class MemeTemplatesData(BaseModel):
    """Payload of the /get_memes success envelope."""

    model_config = ConfigDict(strict=True)

    memes: list[MemeTemplate]


class CaptionImageResponse(BaseModel):
    """A captioned meme template.

    Both URLs are ``HttpUrl`` values and are normalized the same way as
    ``MemeTemplate.url``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    url: HttpUrl = Field(description="URL of the generated image")
    page_url: HttpUrl = Field(description="URL of the generated image page")


class CaptionFont(str, Enum):
    """Caption font. The API defaults to Impact when none is sent."""

    IMPACT = "impact"
    ARIAL = "arial"


class CaptionBox(BaseModel):
    """Text and placement of a single caption box."""

    model_config = ConfigDict(frozen=True)

    text: str
    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    color: str | None = None
    outline_color: str | None = None


class CaptionBoxesRequest(BaseModel):
    """Request data to caption a meme template with any number of boxes.

    Box order is meaningful: the i-th box fills the i-th slot of the template.
    """

    model_config = ConfigDict(frozen=True)

    template_id: str
    font: CaptionFont | None = None
    max_font_size: int | None = None
    boxes: tuple[CaptionBox, ...] = ()


class TopBottomCaptionRequest(BaseModel):
    """Request data to caption a meme template with a top and bottom text."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    text_top: str = Field(serialization_alias="text0")
    text_bottom: str = Field(serialization_alias="text1")
    font: CaptionFont | None = None
    max_font_size: int | None = None


CaptionRequest: TypeAlias = CaptionBoxesRequest | TopBottomCaptionRequest


class CaptionBoxBuilder:
    """Builder for CaptionBox.

    Example:
        >>> CaptionBoxBuilder("hello").dimension(10, 10, 200, 50).build()
    """

    def __init__(self, text: str):
        self._text = text
        self._x: int | None = None
        self._y: int | None = None
        self._width: int | None = None
        self._height: int | None = None
        self._color: str | None = None
        self._outline_color: str | None = None

    def dimension(
        self, x: int, y: int, width: int, height: int
    ) -> "CaptionBoxBuilder":
        """Place the box at (x, y) with the given size in pixels."""
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        return self

    def color(self, color: str) -> "CaptionBoxBuilder":
        self._color = color
        return self

    def outline_color(self, outline_color: str) -> "CaptionBoxBuilder":
        self._outline_color = outline_color
        return self

    def build(self) -> CaptionBox:
        return CaptionBox(
            text=self._text,
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            color=self._color,
            outline_color=self._outline_color,
        )


class CaptionBoxesRequestBuilder:
    """Builder for CaptionBoxesRequest.

    Boxes are kept in the order they are added.
    """

    def __init__(self, template_id: str):
        self._template_id = template_id
        self._font: CaptionFont | None = None
        self._max_font_size: int | None = None
        self._boxes: list[CaptionBox] = []

    def font(self, font: CaptionFont) -> "CaptionBoxesRequestBuilder":
        self._font = font
        return self

    def max_font_size(self, max_font_size: int) -> "CaptionBoxesRequestBuilder":
        self._max_font_size = max_font_size
        return self

    def caption_box(self, caption_box: CaptionBox) -> "CaptionBoxesRequestBuilder":
        self._boxes.append(caption_box)
        return self

    def build(self) -> CaptionBoxesRequest:
        return CaptionBoxesRequest(
            template_id=self._template_id,
            font=self._font,
            max_font_size=self._max_font_size,
            boxes=tuple(self._boxes),
        )


class TopBottomCaptionRequestBuilder:
    """Builder for TopBottomCaptionRequest."""

    def __init__(self, template_id: str, text_top: str, text_bottom: str):
        self._template_id = template_id
        self._text_top = text_top
        self._text_bottom = text_bottom
        self._font: CaptionFont | None = None
        self._max_font_size: int | None = None

    def font(self, font: CaptionFont) -> "TopBottomCaptionRequestBuilder":
        self._font = font
        return self

    def max_font_size(self, max_font_size: int) -> "TopBottomCaptionRequestBuilder":
        self._max_font_size = max_font_size
        return self

    def build(self) -> TopBottomCaptionRequest:
        return TopBottomCaptionRequest(
            template_id=self._template_id,
            text_top=self._text_top,
            text_bottom=self._text_bottom,
            font=self._font,
            max_font_size=self._max_font_size,
        )
