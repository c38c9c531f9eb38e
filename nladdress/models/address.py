import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

# Canonical form: no space, upper-case ASCII letters, first digit non-zero
POSTCODE_PATTERN = r"^[1-9][0-9]{3}[A-Z]{2}$"
_CANONICAL_POSTCODE_RE = re.compile(POSTCODE_PATTERN, re.ASCII)


class Postcode(BaseModel):
    """Canonical Dutch postcode, e.g. '9711AC'. Build it with lookup.validator.normalize."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def check_canonical(cls, value: str) -> str:
        if not _CANONICAL_POSTCODE_RE.fullmatch(value):
            raise ValueError(f"not a canonical Dutch postcode: '{value}'")
        return value

    @property
    def formatted(self) -> str:
        return f"{self.value[:4]} {self.value[4:]}"

    def __str__(self) -> str:
        return self.value


class PostcodeQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    postcode: Postcode
    house_number: str


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return self.lat is not None and self.lng is not None


class Address(BaseModel):
    """Canonical address produced by whichever postcode provider answered first."""

    model_config = ConfigDict(frozen=True)

    street: str
    house_number: str
    house_number_addition: Optional[str] = None
    postcode: str
    city: Optional[str] = None
    province: Optional[str] = None
    municipality: Optional[str] = None
    coordinates: Coordinates = Coordinates()
    provider_id: Optional[str] = None

    @computed_field
    @property
    def full_address(self) -> str:
        number = self.house_number
        if self.house_number_addition:
            # Letters attach directly (10A), anything else gets a hyphen (10-2)
            if self.house_number_addition.isalpha():
                number += self.house_number_addition
            else:
                number += f"-{self.house_number_addition}"
        line1 = " ".join(part for part in (self.street, number) if part)
        line2 = " ".join(part for part in (self.postcode, self.city) if part)
        return ", ".join(part for part in (line1, line2) if part)
