"""Allow-listed product input.

Form fields arrive as ``product[name]``, ``product[description]`` and
``product[featured_image]``. Only those three attributes are ever read from a
request; everything else is dropped before it reaches the entity.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, ConfigDict
from starlette.datastructures import FormData, UploadFile

from src.storefront.core.errors import ParameterMissingError


class ImageUpload(BaseModel):
    """An uploaded file waiting to be attached as a featured image."""

    filename: str
    content_type: str
    data: bytes

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix.lower()

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


class ProductParams(BaseModel):
    """Whitelisted product attributes submitted by a client."""

    model_config = ConfigDict(extra="ignore")

    PERMITTED: ClassVar[tuple[str, ...]] = ("name", "description", "featured_image")
    ROOT: ClassVar[str] = "product"

    name: str | None = None
    description: str | None = None
    featured_image: ImageUpload | None = None

    @classmethod
    async def from_form(cls, form: FormData) -> ProductParams:
        """Extract the permitted ``product[...]`` fields from submitted form data.

        Raises:
            ParameterMissingError: no ``product[...]`` field was submitted.
        """
        prefix = f"{cls.ROOT}["
        present = False
        values: dict[str, object] = {}

        for key, value in form.multi_items():
            if not (key.startswith(prefix) and key.endswith("]")):
                continue
            present = True

            field = key[len(prefix):-1]
            if field not in cls.PERMITTED:
                logger.info("Unpermitted parameter: {}", field)
                continue

            if field == "featured_image":
                # An empty file input still submits a part with no filename.
                if isinstance(value, UploadFile) and value.filename:
                    values[field] = ImageUpload(
                        filename=value.filename,
                        content_type=value.content_type or "application/octet-stream",
                        data=await value.read(),
                    )
                continue

            if isinstance(value, str):
                values[field] = value

        if not present:
            raise ParameterMissingError(cls.ROOT)

        return cls(**values)

    def attributes(self) -> dict[str, str | None]:
        """Submitted text attributes, excluding the ones the client left out."""
        return self.model_dump(exclude_unset=True, exclude={"featured_image"})
