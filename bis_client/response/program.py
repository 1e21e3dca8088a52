from __future__ import annotations
from typing import Any, ClassVar, FrozenSet, Mapping, Optional, Set

from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import InvalidArgumentError

PROGRAM_SLUGS: FrozenSet[str] = frozenset({"ap", "pamatky", "brdo", "ekostan", "psb", "vzdelavani"})


def _require_known_slug(value: Any) -> str:
    if not isinstance(value, str) or value not in PROGRAM_SLUGS:
        raise InvalidArgumentError(f"Value `{value}` is not of valid types for `slug` parameter.")
    return value


class ProgramValue(BaseModel):
    """Program classification of an event as returned by the catalog API."""

    PROGRAM_NATURE: ClassVar[str] = "ap"
    PROGRAM_SIGHTS: ClassVar[str] = "pamatky"
    PROGRAM_BRDO: ClassVar[str] = "brdo"
    PROGRAM_EKOSTAN: ClassVar[str] = "ekostan"
    PROGRAM_PSB: ClassVar[str] = "psb"
    PROGRAM_EDUCATION: ClassVar[str] = "vzdelavani"
    SLUGS: ClassVar[FrozenSet[str]] = PROGRAM_SLUGS

    slug: str
    name: str

    model_config = ConfigDict(frozen=True)

    def __init__(self, slug: str, name: str, **data: Any):
        super().__init__(slug=slug, name=name, **data)

    @field_validator("slug", mode="before")
    @classmethod
    def _check_slug(cls, value: Any) -> Any:
        # InvalidArgumentError is not a ValueError, so pydantic lets it propagate unwrapped.
        return _require_known_slug(value)

    # model_construct and model_copy skip validation; keep the slug invariant on both paths.
    @classmethod
    def model_construct(cls, _fields_set: Optional[Set[str]] = None, **values: Any) -> "ProgramValue":
        _require_known_slug(values.get("slug"))
        return super().model_construct(_fields_set, **values)

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "ProgramValue":
        if update and "slug" in update:
            _require_known_slug(update["slug"])
        return super().model_copy(update=update, deep=deep)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProgramValue":
        return cls(payload.get("slug"), payload.get("name"))

    def is_nature(self) -> bool:
        return self.slug == self.PROGRAM_NATURE

    def is_sights(self) -> bool:
        return self.slug == self.PROGRAM_SIGHTS
