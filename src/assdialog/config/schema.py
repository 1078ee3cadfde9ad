from fractions import Fraction
from pathlib import Path
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainValidator

from assdialog.models import FieldLimits
from assdialog.template.compiler import DEFAULT_FORMAT
from assdialog.timing import compute_ratio, parse_frame_rate


def _validate_fps(value: Any) -> Fraction:
    # Non-positive rates are accepted here and mean "no retiming" (ratio 1).
    return parse_frame_rate(value)


FrameRateField = Annotated[Fraction, PlainValidator(_validate_fps)]


class FieldLimitsModel(BaseModel):
    """Truncation capacities per field; null disables truncation."""
    style: Optional[int] = Field(default=127, ge=0)
    actor: Optional[int] = Field(default=127, ge=0)
    effect: Optional[int] = Field(default=1023, ge=0)
    text: Optional[int] = Field(default=2047, ge=0)
    line_length: Optional[int] = Field(default=4095, ge=1)

    def to_limits(self) -> FieldLimits:
        return FieldLimits(**self.model_dump())


class ConversionConfig(BaseModel):
    """Everything the conversion driver needs from its caller.

    ``template`` is the raw format string as typed, with ``\\t``/``\\n``
    escapes still unexpanded.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    input_path: Optional[Path] = None    # None or "-" means stdin
    output_path: Optional[Path] = None   # None or "-" means stdout
    old_fps: Optional[FrameRateField] = None
    new_fps: Optional[FrameRateField] = None
    template: str = DEFAULT_FORMAT
    strict: bool = False
    single_pass: bool = False
    limits: FieldLimitsModel = Field(default_factory=FieldLimitsModel)

    @property
    def ratio(self) -> Fraction:
        return compute_ratio(self.old_fps, self.new_fps)
