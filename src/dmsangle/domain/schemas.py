from pydantic import BaseModel, Field

from dmsangle.angles import Dms


class AngleRecord(BaseModel):
    text: str
    decimal: float
    degrees: float
    minutes: float
    seconds: float
    sign: int = Field(ge=-1, le=1)

    model_config = {"frozen": True}

    @classmethod
    def from_dms(cls, dms: Dms, fraction_digits: int = 0) -> "AngleRecord":
        return cls(
            text=dms.format(fraction_digits),
            decimal=dms.to_decimal(),
            degrees=dms.degrees,
            minutes=dms.minutes,
            seconds=dms.seconds,
            sign=dms.sign,
        )


class ConversionRequest(BaseModel):
    value: str
    fraction_digits: int = Field(default=0, ge=0)
