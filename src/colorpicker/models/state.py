"""Store state model."""

from pydantic import BaseModel, ConfigDict, Field

from .color import ColorValue
from .enums import FormatTag


class StoreState(BaseModel):
    """Snapshot of everything a ColorStateStore owns.

    ``last_raw_edit`` backs a free-typing hex field: it echoes what the user
    typed even when that text does not parse yet, so it may disagree with
    ``current`` until the next valid parse.
    """

    model_config = ConfigDict(frozen=True)

    current: ColorValue = Field(default_factory=ColorValue.black)
    last_raw_edit: str = Field(default="000000", description="Text last typed into the hex field")
    output_format: FormatTag = Field(default=FormatTag.HEX, description="Shape forwarded outward")
