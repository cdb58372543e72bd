"""Record models shown in the lists and pushed onto the navigation path."""

from abc import abstractmethod
from typing import Annotated, Any, Literal, Mapping, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class RecordBase(BaseModel):
    """
    Common base for every navigable record.

    Records are immutable and compare by identity (``id``), so two records
    with the same visible fields are still distinct rows.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)

    @property
    @abstractmethod
    def display_text(self) -> str:
        """Text shown for the record in lists and breadcrumbs."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))


class Manufacturer(RecordBase):
    """A vehicle manufacturer (brand)."""

    kind: Literal["manufacturer"] = "manufacturer"
    name: str

    @property
    def display_text(self) -> str:
        return self.name


class VehicleEntry(RecordBase):
    """A single vehicle: make, model and model year."""

    kind: Literal["vehicle"] = "vehicle"
    make: str
    model: str
    year: int

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``2022 Ford Escape``."""
        return f"{self.year} {self.make} {self.model}"

    @property
    def display_text(self) -> str:
        return self.label


class LinkPage(RecordBase):
    """A plain link whose destination is a page of text."""

    kind: Literal["link"] = "link"
    title: str
    body: str

    @property
    def display_text(self) -> str:
        return self.title


Record = Annotated[
    Union[Manufacturer, VehicleEntry, LinkPage],
    Field(discriminator="kind"),
]

_RECORD_ADAPTER: TypeAdapter = TypeAdapter(Record)


def parse_record(data: Mapping[str, Any]) -> Record:
    """
    Build a record from a plain mapping, selecting the variant by ``kind``.

    Raises:
        pydantic.ValidationError: if ``kind`` is missing or unknown, or the
            fields do not fit the selected variant.
    """
    return _RECORD_ADAPTER.validate_python(dict(data))
