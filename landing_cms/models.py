"""
Landing CMS - Content Models

Pydantic models for the page content document.  The JSON keys are camelCase
(``whatsappNumber``, ``serviceArea`` ...) because the site's front-end reads
them directly; Python code uses the snake_case attribute names.  Only the
camelCase keys are accepted on input.

Every field has a zero default so an update that omits a field resets it
rather than keeping the previous value.  An explicit ``null`` is treated the
same way, which also lets files that store empty lists as ``null`` load.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base for all content models: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_to_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------
class HeroSection(ContentModel):
    title: str = ""
    subtitle: str = ""
    description: str = ""
    whatsapp_number: str = ""
    whatsapp_message: str = ""


class AboutSection(ContentModel):
    title: str = ""
    description1: str = ""
    description2: str = ""
    description3: str = ""


class ProgramItem(ContentModel):
    """A single program (SD or SMP)."""

    title: str = ""
    description: str = ""
    features: List[str] = Field(default_factory=list)


class ProgramSection(ContentModel):
    title: str = ""
    sd: ProgramItem = Field(default_factory=ProgramItem)
    smp: ProgramItem = Field(default_factory=ProgramItem)


class GalleryItem(ContentModel):
    title: str = ""
    image: str = ""  # public path, e.g. /uploads/photo.jpg


class GallerySection(ContentModel):
    title: str = ""
    items: List[GalleryItem] = Field(default_factory=list)


class TestimonialItem(ContentModel):
    text: str = ""
    author: str = ""


class TestimonialsSection(ContentModel):
    title: str = ""
    items: List[TestimonialItem] = Field(default_factory=list)


class ContactSection(ContentModel):
    title: str = ""
    description: str = ""
    service_area: str = ""
    button_text: str = ""


class FooterSection(ContentModel):
    text: str = ""


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------
class ContentDocument(ContentModel):
    """The complete page content.  Field order is the serialization order."""

    hero: HeroSection = Field(default_factory=HeroSection)
    about: AboutSection = Field(default_factory=AboutSection)
    program: ProgramSection = Field(default_factory=ProgramSection)
    gallery: GallerySection = Field(default_factory=GallerySection)
    testimonials: TestimonialsSection = Field(default_factory=TestimonialsSection)
    contact: ContactSection = Field(default_factory=ContactSection)
    footer: FooterSection = Field(default_factory=FooterSection)

    def to_json(self) -> str:
        """Serialize with camelCase keys and 2-space indentation."""
        return self.model_dump_json(by_alias=True, indent=2)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------
class LoginRequest(ContentModel):
    username: str = ""
    password: str = ""
